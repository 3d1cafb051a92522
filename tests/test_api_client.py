"""
Тести для CaseAPIClient: відображення помилок транспорту в RequestFailed

HTTP підміняється StubHTTP з наперед заданими відповідями.

Запуск: pytest tests/test_api_client.py -v
"""

import pytest
import requests

from med_sim.config import ClientConfig
from med_sim.errors import RequestFailed


class StubResponse:
    def __init__(self, status_code=200, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class StubHTTP:
    """
    Замість requests.Session.

    replies — {(method, path): StubResponse або виняток}
    """

    def __init__(self, replies):
        self.headers = {}
        self.replies = replies
        self.calls = []

    def request(self, method, url, timeout=None, **kwargs):
        path = url.split("/api", 1)[1]
        self.calls.append((method, path))
        reply = self.replies[(method, path)]
        if isinstance(reply, Exception):
            raise reply
        return reply


def _session_body(**overrides):
    data = {
        "id": "s1",
        "specialty": "orthopedics",
        "current_stage": "active",
        "chat_history": [],
        "total_points": 0,
        "total_cost": 0,
        "diagnosis_attempts": 0,
    }
    data.update(overrides)
    return data


def _controller(replies):
    from med_sim.client import CaseAPIClient, SessionController

    http = StubHTTP(replies)
    api = CaseAPIClient(ClientConfig(backend_url="http://backend"), http=http)
    return SessionController(api=api), http


@pytest.fixture
def session():
    from med_sim.schemas import Session
    return Session.model_validate(_session_body())


CHAT_OK = StubResponse(200, {"accepted": True})


# =============================================================================
# Шляхи помилок
# =============================================================================

def test_transport_error_becomes_request_failed(session):
    controller, http = _controller({
        ("POST", "/chat"): requests.ConnectionError("connection refused"),
    })

    with pytest.raises(RequestFailed) as exc_info:
        controller.send_chat_message(session, "Any swelling?")

    assert exc_info.value.status_code is None
    assert "connection refused" in controller.error
    assert not controller.busy
    assert http.calls == [("POST", "/chat")]
    assert session.transcript == ()


def test_non_json_body_becomes_request_failed(session):
    controller, http = _controller({
        ("POST", "/chat"): CHAT_OK,
        ("GET", "/session/s1"): StubResponse(200, ValueError("no JSON"), text="<html>"),
    })

    with pytest.raises(RequestFailed, match="non-JSON"):
        controller.send_chat_message(session, "Any swelling?")

    assert controller.error
    assert not controller.busy
    assert http.calls == [("POST", "/chat"), ("GET", "/session/s1")]


def test_invalid_session_payload_becomes_request_failed(session):
    """diagnosis_attempts без відповідних записів — невалідна сесія"""
    controller, _ = _controller({
        ("POST", "/chat"): CHAT_OK,
        ("GET", "/session/s1"): StubResponse(200, _session_body(diagnosis_attempts=2)),
    })

    with pytest.raises(RequestFailed, match="invalid session"):
        controller.send_chat_message(session, "Any swelling?")

    assert "diagnosis_attempts" in controller.error
    assert not controller.busy
    assert session.diagnosis_attempts == 0


def test_error_status_uses_detail(session):
    controller, _ = _controller({
        ("POST", "/chat"): StubResponse(503, {"detail": "Model overloaded"}),
    })

    with pytest.raises(RequestFailed) as exc_info:
        controller.send_chat_message(session, "Any swelling?")

    assert exc_info.value.status_code == 503
    assert "Model overloaded (HTTP 503)" in controller.error


def test_mixed_timezones_in_read_back(session):
    """Час без зони (UTC) та з зоною в одному транскрипті"""
    controller, _ = _controller({
        ("POST", "/chat"): CHAT_OK,
        ("GET", "/session/s1"): StubResponse(200, _session_body(chat_history=[
            {"type": "user", "timestamp": "2025-03-01T09:00:00", "message": "hi"},
            {"type": "doctor", "timestamp": "2025-03-01T09:00:01+00:00", "message": "Hello"},
        ])),
    })

    updated = controller.send_chat_message(session, "hi")

    assert [entry.timestamp.utcoffset().total_seconds() for entry in updated.transcript] == [0, 0]
    assert controller.error is None


# =============================================================================
# Запит
# =============================================================================

def test_chat_message_sent_as_typed(session):
    """Порожнє після обрізання — помилка; інакше текст іде без змін"""
    controller, _ = _controller({
        ("POST", "/chat"): CHAT_OK,
        ("GET", "/session/s1"): StubResponse(200, _session_body()),
    })
    sent = []
    controller.api.chat = lambda session_id, message: sent.append(message)

    controller.send_chat_message(session, "  Any swelling?\n")

    assert sent == ["  Any swelling?\n"]


def test_user_agent_header_is_set():
    from med_sim.client import CaseAPIClient

    http = StubHTTP({})
    CaseAPIClient(ClientConfig(user_agent="med-sim-test"), http=http)

    assert http.headers["User-Agent"] == "med-sim-test"
