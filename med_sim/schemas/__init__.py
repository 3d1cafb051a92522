"""
MedSim — Модуль схем даних (schemas)

Pydantic моделі для валідації та розбору відповідей backend.

Компоненти:
- transcript.py: UserMessage, DoctorReply, TestResult, DiagnosisSubmission
- session.py: Stage, Session, ScoringRules

Приклад використання:
    from med_sim.schemas import Session, Stage

    session = Session.model_validate(payload)

    for entry in session.transcript:
        print(entry.kind, entry.timestamp)

    # Назад у формат backend
    data = session.model_dump(by_alias=True, mode="json")
"""

# Transcript schemas
from .transcript import (
    EntryKind,
    UserMessage,
    DoctorReply,
    TestResult,
    DiagnosisSubmission,
    TranscriptEntry,
)

# Session schemas
from .session import (
    Stage,
    Session,
    ScoringRules,
)


__all__ = [
    # Transcript
    "EntryKind",
    "UserMessage",
    "DoctorReply",
    "TestResult",
    "DiagnosisSubmission",
    "TranscriptEntry",

    # Session
    "Stage",
    "Session",
    "ScoringRules",
]
