"""
MedSim — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .sessions import router as sessions_router
from .actions import router as actions_router
from .scoring import router as scoring_router

__all__ = [
    'health_router',
    'sessions_router',
    'actions_router',
    'scoring_router',
]
