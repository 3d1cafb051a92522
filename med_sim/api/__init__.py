"""
MedSim — Sandbox REST API

FastAPI backend з детермінованим вмістом для локальної роботи
та контрактних тестів клієнта.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic моделі запитів
- dependencies.py: Сховище сесій та логіка випадку
- case_library.py: Шаблонні випадки

Запуск:
    uvicorn med_sim.api.app:app --reload --port 8000

Документація:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET  /health                      - Health check
    GET  /api/scoring-rules           - Правила балів
    POST /api/session                 - Новий випадок
    GET  /api/session/{id}            - Стан сесії
    POST /api/chat                    - Питання лікарю
    POST /api/request-test            - Обстеження
    POST /api/submit-diagnosis        - Діагноз
"""

from .app import app
from .dependencies import session_store, get_store


__all__ = [
    "app",
    "session_store",
    "get_store",
]
