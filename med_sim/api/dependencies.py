"""
MedSim — API Dependencies

Dependency Injection для FastAPI.
Сховище сесій sandbox та логіка шаблонного випадку.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List
import threading
import uuid

from med_sim.schemas import (
    DiagnosisSubmission,
    DoctorReply,
    Session,
    Stage,
    TestResult,
    UserMessage,
)

from .case_library import CaseTemplate, pick_template
from .config import config


class SessionNotFound(KeyError):
    """Сесії з таким id немає"""


class SessionClosed(RuntimeError):
    """Сесія вже завершена"""


class SimulatedCase:
    """
    Сесія sandbox.
    Тримає стан одного випадку і видає його як Session.
    """

    def __init__(self, session_id: str, specialty: str, template: CaseTemplate):
        self.session_id = session_id
        self.specialty = specialty
        self.template = template

        self.stage = Stage.ACTIVE
        self.entries: List = []
        self.total_points = 0
        self.total_cost = 0.0
        self.diagnosis_attempts = 0

        self.created_at = self._now()
        self.updated_at = self.created_at

    def _now(self) -> datetime:
        """Неспадний час для записів транскрипту"""
        now = datetime.now(timezone.utc)
        if self.entries and now < self.entries[-1].timestamp:
            return self.entries[-1].timestamp
        return now

    def _ensure_active(self) -> None:
        if self.stage == Stage.COMPLETED:
            raise SessionClosed(f"Session {self.session_id} is already completed")

    def _score(self, points: int) -> int:
        self.total_points += points
        self.updated_at = self._now()
        return points

    def chat(self, message: str) -> dict:
        """Питання користувача + відповідь лікаря"""
        self._ensure_active()
        scoring = config.scoring

        reply = self.template.answer(message)
        points = scoring.helpful_question if reply else scoring.irrelevant_question

        self.entries.append(UserMessage(
            timestamp=self._now(),
            message=message,
            points_earned=self._score(points),
        ))
        self.entries.append(DoctorReply(
            timestamp=self._now(),
            message=reply or (
                "That doesn't help much with this case. "
                "Try asking about the **history** or the **examination**."
            ),
        ))
        return {"points_earned": points}

    def request_test(self, test_type: str, body_part: str) -> dict:
        """Призначити обстеження: вартість + бали за доречність"""
        self._ensure_active()
        scoring = config.scoring

        appropriate = test_type in self.template.appropriate_tests
        points = scoring.correct_test_order if appropriate else scoring.incorrect_test_order
        cost = self.template.price(test_type)

        self.total_cost += cost
        self.entries.append(TestResult(
            timestamp=self._now(),
            test_type=test_type,
            body_part=body_part,
            cost=cost,
            results=self.template.finding(test_type),
            is_appropriate=appropriate,
            reasoning=(
                "This test directly addresses the working diagnosis."
                if appropriate else
                "This test is unlikely to change management here."
            ),
            points_earned=self._score(points),
        ))
        return {"cost": cost, "points_earned": points}

    def submit_diagnosis(self, diagnosis: str) -> dict:
        """Оцінити діагноз; правильний діагноз завершує випадок"""
        self._ensure_active()
        scoring = config.scoring

        correct = self.template.is_correct(diagnosis)
        points = scoring.correct_diagnosis if correct else scoring.incorrect_diagnosis
        self.diagnosis_attempts += 1

        evaluation = (
            f"**Correct.** The final diagnosis is *{self.template.diagnosis_name}*."
            if correct else
            "**Not quite.** Review the findings and consider further tests."
        )
        self.entries.append(DiagnosisSubmission(
            timestamp=self._now(),
            diagnosis=diagnosis,
            evaluation=evaluation,
            attempt_number=self.diagnosis_attempts,
            is_correct=correct,
            points_earned=self._score(points),
        ))

        if correct:
            self.stage = Stage.COMPLETED
        return {"is_correct": correct, "points_earned": points}

    def to_session(self) -> Session:
        return Session(
            id=self.session_id,
            specialty=self.specialty,
            scenario=self.template.scenario,
            stage=self.stage,
            transcript=tuple(self.entries),
            total_points=self.total_points,
            total_cost=self.total_cost,
            diagnosis_attempts=self.diagnosis_attempts,
        )


class SessionStore:
    """
    Сховище сесій sandbox в пам'яті.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.sessions: Dict[str, SimulatedCase] = {}
        self.lock = threading.Lock()

    def create(self, specialty: str) -> SimulatedCase:
        """Створити нову сесію"""
        session_id = str(uuid.uuid4())
        case = SimulatedCase(session_id, specialty, pick_template(specialty))

        with self.lock:
            # Очистка старих сесій
            self._cleanup_old_sessions()

            if len(self.sessions) >= config.max_sessions:
                oldest = min(self.sessions.values(), key=lambda c: c.updated_at)
                del self.sessions[oldest.session_id]

            self.sessions[session_id] = case

        return case

    def get(self, session_id: str) -> SimulatedCase:
        case = self.sessions.get(session_id)
        if case is None:
            raise SessionNotFound(session_id)
        return case

    def get_active_count(self) -> int:
        return len(self.sessions)

    def clear(self) -> None:
        with self.lock:
            self.sessions.clear()

    def _cleanup_old_sessions(self):
        """Видалити застарілі сесії"""
        timeout = timedelta(minutes=config.session_timeout_minutes)
        now = datetime.now(timezone.utc)

        expired = [
            sid for sid, case in self.sessions.items()
            if now - case.updated_at > timeout
        ]

        for sid in expired:
            del self.sessions[sid]


# Глобальне сховище
session_store = SessionStore()


def get_store() -> SessionStore:
    """Dependency: отримати сховище сесій"""
    return session_store
