"""
MedSim — Контролер сесії

SessionController виконує операції над сесією через backend:
- create_session: новий випадок для спеціальності
- send_chat_message: питання лікарю
- request_test: призначення обстеження
- submit_diagnosis: спроба діагнозу

Схема "змінити → перечитати": після кожного запису (chat/test/diagnosis)
контролер робить GET /session/{id} і повертає канонічний стан backend.
Відповідь самого запису може бути неповною, тому вона ігнорується.

Контролер не тримає сесію: вона передається явно і повертається
новим значенням. Контролер володіє лише прапорцем busy та останньою
помилкою. При будь-якій помилці попереднє значення сесії лишається
чинним, busy знімається, повтору немає.

Приклад:
    controller = SessionController(CaseAPIClient(config))

    session = controller.create_session("orthopedics")
    session = controller.send_chat_message(session, "What is the pain level?")
    session = controller.request_test(session, "x-ray", "knee")
    session = controller.submit_diagnosis(session, "Meniscus tear")

    if session.is_completed:
        print(f"Score: {session.total_points}")
"""

from contextlib import contextmanager
from typing import Callable, FrozenSet, Iterator, Optional
import logging
import threading

from med_sim.config import ClientConfig
from med_sim.errors import ActionNotPermitted, MedSimError, RequestFailed, ValidationError
from med_sim.schemas import ScoringRules, Session

from . import gate
from .api_client import CaseAPIClient
from .gate import Action

logger = logging.getLogger(__name__)


def _require_text(value: Optional[str], field_name: str) -> str:
    """Обрізати пробіли; порожній ввід — ValidationError"""
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field_name} must not be empty")
    return text


class SessionController:
    """
    Оркестратор операцій над сесією.

    Одночасно виконується не більше однієї операції: друга
    операція під час busy відхиляється з ActionNotPermitted.
    """

    def __init__(
        self,
        api: Optional[CaseAPIClient] = None,
        config: Optional[ClientConfig] = None,
    ):
        self.api = api if api is not None else CaseAPIClient(config)

        self.error: Optional[str] = None
        self._busy = False
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Стан
    # ------------------------------------------------------------------

    @property
    def busy(self) -> bool:
        """Чи виконується зараз операція"""
        return self._busy

    def permitted_actions(self, session: Optional[Session]) -> FrozenSet[Action]:
        """Дозволені дії для сесії з урахуванням busy"""
        if session is None:
            return frozenset()
        return gate.permitted_actions(session.stage, busy=self._busy)

    def can(self, action: Action, session: Optional[Session]) -> bool:
        return action in self.permitted_actions(session)

    def clear_error(self) -> None:
        self.error = None

    # ------------------------------------------------------------------
    # Операції
    # ------------------------------------------------------------------

    def create_session(self, specialty: str) -> Session:
        """
        Створити новий випадок.

        Args:
            specialty: Спеціальність (вільний текст)

        Returns:
            Нова сесія в стадії active

        Raises:
            ValidationError: порожня спеціальність (без мережевого виклику)
            RequestFailed: помилка backend
        """
        with self._operation("create_session"):
            specialty = _require_text(specialty, "Specialty")
            session = self.api.create_session(specialty)
            logger.info(f"Session {session.id} created for '{specialty}'")
            return session

    def send_chat_message(self, session: Session, text: str) -> Session:
        """Надіслати повідомлення лікарю і перечитати сесію"""
        with self._operation(Action.CHAT.value):
            gate.check(Action.CHAT, session)
            # Пробіли обрізаються лише для перевірки, повідомлення йде як є
            _require_text(text, "Message")
            return self._write_then_refresh(
                session, lambda: self.api.chat(session.id, text)
            )

    def request_test(self, session: Session, test_type: str, body_part: str = "") -> Session:
        """
        Призначити обстеження.

        body_part може бути порожнім, test_type — ні.
        """
        with self._operation(Action.ORDER_TEST.value):
            gate.check(Action.ORDER_TEST, session)
            test_type = _require_text(test_type, "Test type")
            body_part = (body_part or "").strip()
            return self._write_then_refresh(
                session, lambda: self.api.request_test(session.id, test_type, body_part)
            )

    def submit_diagnosis(self, session: Session, text: str) -> Session:
        """
        Надіслати діагноз.

        Після перечитування сесія може перейти в completed —
        рішення приймає backend.
        """
        with self._operation(Action.SUBMIT_DIAGNOSIS.value):
            gate.check(Action.SUBMIT_DIAGNOSIS, session)
            diagnosis = _require_text(text, "Diagnosis")
            refreshed = self._write_then_refresh(
                session, lambda: self.api.submit_diagnosis(session.id, diagnosis)
            )
            if refreshed.is_completed:
                logger.info(
                    f"Session {session.id} completed after "
                    f"{refreshed.diagnosis_attempts} attempt(s), "
                    f"{refreshed.total_points} points"
                )
            return refreshed

    def refresh(self, session: Session) -> Session:
        """Перечитати канонічний стан сесії (лише читання)"""
        with self._operation("refresh"):
            return self._read_back(session)

    def load_scoring_rules(self) -> ScoringRules:
        """Правила балів для показу (не впливають на підрахунок)"""
        return self.api.get_scoring_rules()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @contextmanager
    def _operation(self, name: str) -> Iterator[None]:
        """Прапорець busy + запис помилки для користувача"""
        if not self._lock.acquire(blocking=False):
            raise ActionNotPermitted(name, "another operation is in progress")

        self._busy = True
        self.error = None
        try:
            yield
        except MedSimError as e:
            self.error = str(e)
            logger.warning(f"{name} failed: {e}")
            raise
        finally:
            self._busy = False
            self._lock.release()

    def _write_then_refresh(self, session: Session, write: Callable[[], object]) -> Session:
        # Відповідь запису — лише підтвердження, тому ігнорується
        write()
        return self._read_back(session)

    def _read_back(self, session: Session) -> Session:
        refreshed = self.api.get_session(session.id)
        if refreshed.id != session.id:
            raise RequestFailed(
                f"Backend returned session {refreshed.id} instead of {session.id}"
            )
        logger.debug(
            f"Session {session.id}: {len(session.transcript)} → "
            f"{len(refreshed.transcript)} entries"
        )
        return refreshed
