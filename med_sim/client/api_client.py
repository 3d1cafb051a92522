"""
MedSim — HTTP клієнт backend API

Тонкий транспорт для endpoints backend:
    POST /session            {specialty}                       → Session
    GET  /session/{id}                                          → Session
    POST /chat               {session_id, message}              → ack
    POST /request-test       {session_id, test_type, body_part} → ack
    POST /submit-diagnosis   {session_id, diagnosis}            → ack
    GET  /scoring-rules                                         → ScoringRules

Будь-яка помилка транспорту, неуспішний статус або невалідне тіло
відповіді перетворюється на RequestFailed. Повторів немає.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import requests
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from med_sim.config import ClientConfig
from med_sim.errors import RequestFailed
from med_sim.schemas import ScoringRules, Session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class CaseAPIClient:
    """
    Клієнт backend API.

    Приклад:
        api = CaseAPIClient(ClientConfig(backend_url="http://localhost:8000"))
        session = api.create_session("orthopedics")
        api.chat(session.id, "What is the patient's pain level?")
        session = api.get_session(session.id)

    http можна підмінити будь-яким об'єктом з інтерфейсом
    requests.Session (напр. fastapi.testclient.TestClient).
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http: Optional[Any] = None,
    ):
        self.config = config or ClientConfig()
        self.http = http if http is not None else requests.Session()
        self.http.headers.update({"User-Agent": self.config.user_agent})

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    def create_session(self, specialty: str) -> Session:
        data = self._request("POST", "/session", json={"specialty": specialty})
        return self._parse(Session, data, "session")

    def get_session(self, session_id: str) -> Session:
        data = self._request("GET", f"/session/{session_id}")
        return self._parse(Session, data, "session")

    def chat(self, session_id: str, message: str) -> Any:
        return self._request(
            "POST", "/chat",
            json={"session_id": session_id, "message": message},
        )

    def request_test(self, session_id: str, test_type: str, body_part: str) -> Any:
        return self._request(
            "POST", "/request-test",
            json={
                "session_id": session_id,
                "test_type": test_type,
                "body_part": body_part,
            },
        )

    def submit_diagnosis(self, session_id: str, diagnosis: str) -> Any:
        return self._request(
            "POST", "/submit-diagnosis",
            json={"session_id": session_id, "diagnosis": diagnosis},
        )

    def get_scoring_rules(self) -> ScoringRules:
        data = self._request("GET", "/scoring-rules")
        return self._parse(ScoringRules, data, "scoring rules")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return self.config.api_url + path

    def _request(self, method: str, path: str, **kwargs) -> Any:
        """Виконати запит і повернути розібраний JSON"""
        try:
            response = self.http.request(
                method,
                self._url(path),
                timeout=self.config.timeout_seconds,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise RequestFailed(f"{method} {path} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            detail = self._error_detail(response)
            logger.warning(f"{method} {path} → {response.status_code}: {detail}")
            raise RequestFailed(
                f"{method} {path} was rejected: {detail}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise RequestFailed(
                f"{method} {path} returned a non-JSON body",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _error_detail(response: Any) -> str:
        """Витягнути повідомлення з тіла помилки"""
        try:
            body = response.json()
        except ValueError:
            return (response.text or "").strip()[:200] or "no details"

        if isinstance(body, dict):
            detail = body.get("detail") or body.get("error")
            if detail:
                return str(detail)
        return str(body)[:200]

    @staticmethod
    def _parse(model: Type[ModelT], data: Dict[str, Any], what: str) -> ModelT:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            logger.warning(f"Invalid {what} payload: {e}")
            raise RequestFailed(f"Backend returned an invalid {what}: {e}") from e
