"""
MedSim — Схеми записів транскрипту

Транскрипт сесії — append-only журнал подій чотирьох видів.
Вид визначається полем `type` (так його надсилає backend):

- UserMessage ("user"): питання користувача
- DoctorReply ("doctor"): відповідь лікаря-консультанта (markdown)
- TestResult ("test_result"): результат призначеного обстеження
- DiagnosisSubmission ("diagnosis_submission"): спроба діагнозу

TranscriptEntry — закритий tagged union, розрізнення за `type`.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntryKind(str, Enum):
    """Вид запису транскрипту"""
    USER_MESSAGE = "user"
    DOCTOR_REPLY = "doctor"
    TEST_RESULT = "test_result"
    DIAGNOSIS_SUBMISSION = "diagnosis_submission"


class _Entry(BaseModel):
    """Спільна база: всі записи незмінні та мають timestamp"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    timestamp: datetime = Field(..., description="Час події (від backend)")

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Час без зони вважається UTC"""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def kind(self) -> EntryKind:
        return EntryKind(self.type)


class UserMessage(_Entry):
    """
    Повідомлення користувача в чаті.

    points_earned=None означає "бали не нараховувались",
    0 — подія оцінена нулем балів.
    """
    type: Literal["user"] = "user"
    message: str
    points_earned: Optional[int] = None


class DoctorReply(_Entry):
    """Відповідь лікаря (markdown)"""
    type: Literal["doctor"] = "doctor"
    message: str


class TestResult(_Entry):
    """
    Результат обстеження.

    Приклад:
        TestResult(
            timestamp=datetime.now(),
            test_type="x-ray",
            body_part="knee",
            cost=150,
            results="**Findings:** no fracture",
            is_appropriate=True,
            points_earned=10,
        )
    """
    type: Literal["test_result"] = "test_result"
    test_type: str
    body_part: str = ""
    cost: float = Field(..., ge=0, description="Вартість обстеження")
    results: str = Field(..., description="Результати (markdown)")

    is_appropriate: Optional[bool] = None
    reasoning: Optional[str] = None
    points_earned: Optional[int] = None
    image_url: Optional[str] = None

    # pytest не повинен збирати цей клас як тест
    __test__ = False


class DiagnosisSubmission(_Entry):
    """Спроба діагнозу з оцінкою backend"""
    type: Literal["diagnosis_submission"] = "diagnosis_submission"
    diagnosis: str
    evaluation: str = Field(..., description="Оцінка (markdown)")
    attempt_number: int = Field(..., ge=1)

    is_correct: Optional[bool] = None
    points_earned: Optional[int] = None


TranscriptEntry = Annotated[
    Union[UserMessage, DoctorReply, TestResult, DiagnosisSubmission],
    Field(discriminator="type"),
]
