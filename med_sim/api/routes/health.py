"""
MedSim — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from med_sim import __version__

from ..dependencies import SessionStore, get_store
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: SessionStore = Depends(get_store)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає версію та кількість активних сесій.
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        active_sessions=store.get_active_count()
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": "MedSim Sandbox API",
        "version": __version__,
        "description": "Офлайн backend для симуляції клінічних випадків",
        "docs": "/docs",
        "health": "/health",
    }
