"""
MedSim — Sandbox FastAPI Application

Офлайн backend з тим самим контрактом, що й справжній
сервіс генерації випадків. Вміст детермінований (case_library).

Запуск:
    uvicorn med_sim.api.app:app --reload --host 0.0.0.0 --port 8000

    або:

    python scripts/run_api.py
"""

from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from med_sim import __version__

from .config import config
from .dependencies import session_store
from .routes import (
    health_router,
    sessions_router,
    actions_router,
    scoring_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager.
    """
    print("=" * 60)
    print("🏥 MedSim Sandbox API Starting...")
    print("=" * 60)
    print(f"📍 Swagger UI: http://{config.host}:{config.port}/docs")
    print(f"📍 ReDoc: http://{config.host}:{config.port}/redoc")
    print("=" * 60)

    yield

    # Cleanup при зупинці
    session_store.clear()
    print("🛑 MedSim Sandbox API Stopping...")


# Створюємо додаток
app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


# Middleware для логування запитів
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    # Логуємо тільки API запити
    if request.url.path.startswith(config.api_prefix):
        logger.info(
            f"{request.method} {request.url.path} → {response.status_code} "
            f"({process_time*1000:.1f}ms)"
        )

    return response


# Глобальний обробник помилок
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if config.debug else None
        }
    )


# Підключаємо роутери
app.include_router(health_router)
app.include_router(sessions_router, prefix=config.api_prefix)
app.include_router(actions_router, prefix=config.api_prefix)
app.include_router(scoring_router, prefix=config.api_prefix)
