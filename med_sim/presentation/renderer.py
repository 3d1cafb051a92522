"""
MedSim — Рендеринг транскрипту

Перетворює записи транскрипту та сесію на форми для показу.
Сам показ (markdown, кольори) робить UI; тут лише контракт:

- user → текст, час, бейдж балів (якщо є), автор user
- doctor → markdown, час, автор physician
- test_result → заголовок "<тип> - <ділянка>", вартість, бейдж,
  індикатор доречності з обґрунтуванням, markdown результатів, зображення
- diagnosis_submission → номер спроби, індикатор правильності,
  бейдж, діагноз дослівно, markdown оцінки
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from med_sim.schemas import (
    DiagnosisSubmission,
    DoctorReply,
    EntryKind,
    ScoringRules,
    Session,
    Stage,
    TestResult,
    TranscriptEntry,
    UserMessage,
)

from .badges import BadgeStyle, PointsBadge, PointsTier
from .catalog import label_for_test_type

PHYSICIAN_NAME = "Attending Physician"


@dataclass(frozen=True)
class Indicator:
    """Індикатор (доречність тесту, правильність діагнозу)"""
    label: str
    style: BadgeStyle


@dataclass(frozen=True)
class RenderedEntry:
    """Запис транскрипту, готовий до показу"""
    kind: EntryKind
    body: str
    body_is_markdown: bool
    timestamp_label: str

    author: Optional[str] = None          # "user" | "physician"
    heading: Optional[str] = None
    submitted_text: Optional[str] = None  # діагноз користувача, дослівно
    cost_label: Optional[str] = None
    points_badge: Optional[PointsBadge] = None
    indicator: Optional[Indicator] = None
    note: Optional[str] = None            # обґрунтування доречності
    image_url: Optional[str] = None


@dataclass(frozen=True)
class CaseSummary:
    """Підсумок випадку для бокової панелі"""
    total_points: int
    tier: PointsTier
    diagnosis_attempts: int
    cost_label: str
    status_label: str


# =============================================================================
# Форматування
# =============================================================================

def format_timestamp(moment: datetime) -> str:
    """Локальний час доби"""
    return moment.astimezone().strftime("%H:%M:%S")


def format_cost(amount: float) -> str:
    """350 → "$350", 12.5 → "$12.50" """
    if float(amount).is_integer():
        return f"${int(amount)}"
    return f"${amount:.2f}"


def stage_label(stage: Stage) -> str:
    return "Completed" if stage == Stage.COMPLETED else "In Progress"


def format_test_heading(entry: TestResult) -> str:
    label = label_for_test_type(entry.test_type)
    body_part = entry.body_part.strip()
    if not body_part:
        return label
    return f"{label} - {body_part.title()}"


# =============================================================================
# Записи
# =============================================================================

def _render_user_message(entry: UserMessage) -> RenderedEntry:
    return RenderedEntry(
        kind=EntryKind.USER_MESSAGE,
        author="user",
        body=entry.message,
        body_is_markdown=False,
        timestamp_label=format_timestamp(entry.timestamp),
        points_badge=PointsBadge.for_points(entry.points_earned),
    )


def _render_doctor_reply(entry: DoctorReply) -> RenderedEntry:
    return RenderedEntry(
        kind=EntryKind.DOCTOR_REPLY,
        author="physician",
        heading=PHYSICIAN_NAME,
        body=entry.message,
        body_is_markdown=True,
        timestamp_label=format_timestamp(entry.timestamp),
    )


def _render_test_result(entry: TestResult) -> RenderedEntry:
    indicator = None
    if entry.is_appropriate is not None:
        indicator = (
            Indicator("✓ Appropriate Test", BadgeStyle.POSITIVE)
            if entry.is_appropriate
            else Indicator("⚠ Questionable Choice", BadgeStyle.NEGATIVE)
        )

    return RenderedEntry(
        kind=EntryKind.TEST_RESULT,
        heading=format_test_heading(entry),
        body=entry.results,
        body_is_markdown=True,
        timestamp_label=format_timestamp(entry.timestamp),
        cost_label=format_cost(entry.cost),
        points_badge=PointsBadge.for_points(entry.points_earned),
        indicator=indicator,
        note=entry.reasoning if indicator else None,
        image_url=entry.image_url or None,
    )


def _render_diagnosis_submission(entry: DiagnosisSubmission) -> RenderedEntry:
    if entry.is_correct is None:
        indicator = Indicator("? Not evaluated", BadgeStyle.NEUTRAL)
    elif entry.is_correct:
        indicator = Indicator("✓ Correct", BadgeStyle.POSITIVE)
    else:
        indicator = Indicator("✗ Incorrect", BadgeStyle.NEGATIVE)

    return RenderedEntry(
        kind=EntryKind.DIAGNOSIS_SUBMISSION,
        heading=f"Diagnosis Submission (Attempt #{entry.attempt_number})",
        submitted_text=entry.diagnosis,
        body=entry.evaluation,
        body_is_markdown=True,
        timestamp_label=format_timestamp(entry.timestamp),
        points_badge=PointsBadge.for_points(entry.points_earned),
        indicator=indicator,
    )


def render_entry(entry: TranscriptEntry) -> RenderedEntry:
    """
    Форма показу для одного запису.

    Raises:
        TypeError: невідомий вид запису
    """
    if isinstance(entry, UserMessage):
        return _render_user_message(entry)
    elif isinstance(entry, DoctorReply):
        return _render_doctor_reply(entry)
    elif isinstance(entry, TestResult):
        return _render_test_result(entry)
    elif isinstance(entry, DiagnosisSubmission):
        return _render_diagnosis_submission(entry)
    raise TypeError(f"Unknown transcript entry: {type(entry).__name__}")


def render_transcript(session: Session) -> List[RenderedEntry]:
    """Всі записи в порядку backend"""
    return [render_entry(entry) for entry in session.transcript]


# =============================================================================
# Сесія
# =============================================================================

def build_summary(session: Session) -> CaseSummary:
    return CaseSummary(
        total_points=session.total_points,
        tier=PointsTier.from_points(session.total_points),
        diagnosis_attempts=session.diagnosis_attempts,
        cost_label=format_cost(session.total_cost),
        status_label=stage_label(session.stage),
    )


def scoring_rules_lines(rules: ScoringRules) -> Tuple[List[str], List[str]]:
    """Рядки "Earn Points For" та "Lose Points For" """
    earn = [
        f"Correct test orders: +{rules.correct_test_order} points",
        f"Correct diagnosis: +{rules.correct_diagnosis} points",
        f"Helpful questions: +{rules.helpful_question} points",
    ]
    lose = [
        f"Inappropriate test orders: {rules.incorrect_test_order} points",
        f"Incorrect diagnosis: {rules.incorrect_diagnosis} points",
        f"Irrelevant questions: {rules.irrelevant_question} points",
    ]
    return earn, lose
