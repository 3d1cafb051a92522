"""
MedSim — Sessions Routes

Endpoints життєвого циклу сесії:
- Створення випадку
- Отримання канонічного стану
"""

from fastapi import APIRouter, Depends, HTTPException

from med_sim.schemas import Session

from ..dependencies import SessionNotFound, SessionStore, SimulatedCase, get_store
from ..models import CreateSessionRequest

router = APIRouter(tags=["Sessions"])


def find_case(store: SessionStore, session_id: str) -> SimulatedCase:
    """Знайти сесію або віддати 404"""
    try:
        return store.get(session_id)
    except SessionNotFound:
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )


@router.post("/session", response_model=Session)
async def create_session(
    request: CreateSessionRequest,
    store: SessionStore = Depends(get_store)
) -> Session:
    """
    Створити новий клінічний випадок.

    Приклад:
    ```json
    {
        "specialty": "Hello, I want to improve myself in orthopedics"
    }
    ```
    """
    specialty = request.specialty.strip()
    if not specialty:
        raise HTTPException(status_code=400, detail="Specialty must not be empty")

    case = store.create(specialty)
    return case.to_session()


@router.get("/session/{session_id}", response_model=Session)
async def get_session(
    session_id: str,
    store: SessionStore = Depends(get_store)
) -> Session:
    """
    Отримати поточний стан сесії.

    Повертає повний транскрипт, стадію та підсумки.
    """
    return find_case(store, session_id).to_session()
