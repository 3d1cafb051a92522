"""
MedSim — Схема стану сесії

Session — клієнтське представлення сесії клінічного випадку.
Значення незмінне: після кожного успішного read-back контролер
замінює його цілком, а не оновлює по полях.

Назви полів на дроті збігаються з backend:
    current_stage → stage
    chat_history  → transcript
"""

from enum import Enum
from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .transcript import (
    DiagnosisSubmission,
    EntryKind,
    TestResult,
    TranscriptEntry,
    UserMessage,
)


class Stage(str, Enum):
    """Стадія сесії: active — початкова, completed — термінальна"""
    ACTIVE = "active"
    COMPLETED = "completed"


class Session(BaseModel):
    """
    Стан сесії, як його бачить клієнт.

    total_points, total_cost та diagnosis_attempts рахує backend;
    клієнт їх лише показує.

    Приклад:
        session = Session.model_validate(response.json())
        if session.is_completed:
            ...
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str = Field(..., description="Ідентифікатор від backend")
    specialty: str = Field(..., description="Спеціальність, введена користувачем")
    scenario: str = Field(default="", description="Опис випадку (markdown)")

    stage: Stage = Field(default=Stage.ACTIVE, alias="current_stage")
    transcript: Tuple[TranscriptEntry, ...] = Field(default=(), alias="chat_history")

    total_points: int = 0
    total_cost: float = Field(default=0.0, ge=0)
    diagnosis_attempts: int = Field(default=0, ge=0)

    @field_validator("stage", mode="before")
    @classmethod
    def decode_stage(cls, value: Any) -> Stage:
        """Будь-яка стадія, крім "completed", вважається активною"""
        if isinstance(value, Stage):
            return value
        if str(value).strip().lower() == Stage.COMPLETED.value:
            return Stage.COMPLETED
        return Stage.ACTIVE

    @model_validator(mode="after")
    def check_transcript(self) -> "Session":
        """Лічильник спроб та хронологія мають узгоджуватись з транскриптом"""
        submissions = sum(
            1 for entry in self.transcript if isinstance(entry, DiagnosisSubmission)
        )
        if submissions != self.diagnosis_attempts:
            raise ValueError(
                f"diagnosis_attempts={self.diagnosis_attempts} but transcript "
                f"has {submissions} diagnosis submissions"
            )

        for previous, current in zip(self.transcript, self.transcript[1:]):
            if current.timestamp < previous.timestamp:
                raise ValueError(
                    f"transcript out of order: {current.timestamp.isoformat()} "
                    f"after {previous.timestamp.isoformat()}"
                )
        return self

    @property
    def is_active(self) -> bool:
        return self.stage == Stage.ACTIVE

    @property
    def is_completed(self) -> bool:
        return self.stage == Stage.COMPLETED

    def entries_of(self, kind: EntryKind) -> List[TranscriptEntry]:
        """Записи транскрипту заданого виду (порядок збережено)"""
        return [entry for entry in self.transcript if entry.type == kind.value]

    @property
    def user_messages(self) -> List[UserMessage]:
        return self.entries_of(EntryKind.USER_MESSAGE)

    @property
    def test_results(self) -> List[TestResult]:
        return self.entries_of(EntryKind.TEST_RESULT)

    @property
    def diagnosis_submissions(self) -> List[DiagnosisSubmission]:
        return self.entries_of(EntryKind.DIAGNOSIS_SUBMISSION)

    def __repr__(self) -> str:
        return (
            f"Session("
            f"id={self.id}, "
            f"stage={self.stage.value}, "
            f"entries={len(self.transcript)}, "
            f"points={self.total_points}, "
            f"cost={self.total_cost}"
            f")"
        )


class ScoringRules(BaseModel):
    """
    Правила нарахування балів (лише для показу).

    Значення ніколи не використовуються для підрахунку total_points.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    correct_test_order: int
    correct_diagnosis: int
    helpful_question: int
    incorrect_test_order: int
    incorrect_diagnosis: int
    irrelevant_question: int
