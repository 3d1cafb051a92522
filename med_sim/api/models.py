"""
MedSim — API Models

Pydantic моделі запитів та відповідей sandbox API.
Сесія віддається моделлю med_sim.schemas.Session (поля з alias).
"""

from pydantic import BaseModel, Field
from typing import Optional


# ============================================================
# Requests
# ============================================================

class CreateSessionRequest(BaseModel):
    """Запит на створення випадку"""
    specialty: str = Field(..., min_length=1, max_length=2000)


class ChatRequest(BaseModel):
    """Повідомлення лікарю"""
    session_id: str
    message: str = Field(..., min_length=1, max_length=5000)


class OrderTestRequest(BaseModel):
    """Призначення обстеження"""
    session_id: str
    test_type: str = Field(..., min_length=1)
    body_part: str = ""


class DiagnosisRequest(BaseModel):
    """Спроба діагнозу"""
    session_id: str
    diagnosis: str = Field(..., min_length=1, max_length=5000)


# ============================================================
# Responses (часткові підтвердження)
# ============================================================

class ActionAck(BaseModel):
    """Підтвердження дії — лише дельта, не повний стан"""
    session_id: str
    accepted: bool = True
    points_earned: Optional[int] = None
    cost: Optional[float] = None
    is_correct: Optional[bool] = None


class HealthResponse(BaseModel):
    """Відповідь health check"""
    status: str = "ok"
    version: str
    active_sessions: int


class ErrorResponse(BaseModel):
    """Відповідь з помилкою"""
    error: str
    detail: Optional[str] = None
