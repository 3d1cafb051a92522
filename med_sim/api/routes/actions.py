"""
MedSim — Actions Routes

Дії користувача над сесією. Кожна відповідає лише
підтвердженням (ActionAck); повний стан — через GET /session/{id}.
"""

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import SessionClosed, SessionStore, get_store
from ..models import ActionAck, ChatRequest, DiagnosisRequest, OrderTestRequest
from .sessions import find_case

router = APIRouter(tags=["Actions"])


@router.post("/chat", response_model=ActionAck)
async def chat(
    request: ChatRequest,
    store: SessionStore = Depends(get_store)
) -> ActionAck:
    """
    Поставити питання лікарю.

    Бали нараховуються за доречні питання.
    """
    case = find_case(store, request.session_id)

    try:
        result = case.chat(request.message)
    except SessionClosed as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ActionAck(session_id=case.session_id, **result)


@router.post("/request-test", response_model=ActionAck)
async def request_test(
    request: OrderTestRequest,
    store: SessionStore = Depends(get_store)
) -> ActionAck:
    """
    Призначити обстеження.

    Приклад:
    ```json
    {
        "session_id": "...",
        "test_type": "mri",
        "body_part": "knee"
    }
    ```
    """
    case = find_case(store, request.session_id)

    try:
        result = case.request_test(request.test_type, request.body_part.strip())
    except SessionClosed as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ActionAck(session_id=case.session_id, **result)


@router.post("/submit-diagnosis", response_model=ActionAck)
async def submit_diagnosis(
    request: DiagnosisRequest,
    store: SessionStore = Depends(get_store)
) -> ActionAck:
    """
    Надіслати діагноз.

    Правильний діагноз завершує випадок (current_stage = completed).
    """
    case = find_case(store, request.session_id)

    try:
        result = case.submit_diagnosis(request.diagnosis.strip())
    except SessionClosed as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ActionAck(session_id=case.session_id, **result)
