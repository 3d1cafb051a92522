"""
MedSim — Симулятор клінічних випадків

Користувач обирає спеціальність, backend генерує випадок,
далі — діалог з лікарем, обстеження та діагноз з балами й вартістю.

Модулі:
- config: Конфігурація системи
- schemas: Сесія та записи транскрипту
- client: Action Gate, HTTP клієнт, контролер сесії
- presentation: Бейджі, рендеринг транскрипту
- api: Sandbox backend (FastAPI)
- web_ui: Веб-інтерфейс (Streamlit)
"""

__version__ = "0.1.0"

from .config import MedSimConfig, get_default_config
