"""
Тести для sandbox API та клієнта поверх нього

Запуск: pytest tests/test_api.py -v
Або демо: python tests/test_api.py
"""

import pytest
from fastapi.testclient import TestClient

from med_sim.api import app, get_store
from med_sim.config import ClientConfig


@pytest.fixture
def client():
    get_store().clear()
    yield TestClient(app)
    get_store().clear()


@pytest.fixture
def controller(client):
    """SessionController, що ходить у sandbox через TestClient"""
    from med_sim.client import CaseAPIClient, SessionController

    api = CaseAPIClient(ClientConfig(backend_url="http://testserver"), http=client)
    return SessionController(api=api)


def _create(client, specialty="orthopedics") -> dict:
    response = client.post("/api/session", json={"specialty": specialty})
    assert response.status_code == 200
    return response.json()


# =============================================================================
# Службові endpoints
# =============================================================================

def test_root_endpoint(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "MedSim Sandbox API"


def test_health_endpoint(client):
    _create(client)
    data = client.get("/health").json()

    assert data["status"] == "ok"
    assert data["active_sessions"] == 1
    print(f"✓ Health: {data}")


def test_scoring_rules_endpoint(client):
    data = client.get("/api/scoring-rules").json()

    assert data == {
        "correct_test_order": 10,
        "correct_diagnosis": 50,
        "helpful_question": 5,
        "incorrect_test_order": -5,
        "incorrect_diagnosis": -10,
        "irrelevant_question": -2,
    }


# =============================================================================
# Сесії
# =============================================================================

def test_create_session_wire_format(client):
    """Сесія на дроті: current_stage та chat_history"""
    data = _create(client)

    assert data["current_stage"] == "active"
    assert data["chat_history"] == []
    assert data["total_points"] == 0
    assert data["total_cost"] == 0
    assert data["diagnosis_attempts"] == 0
    assert data["scenario"].startswith("## Patient Presentation")


def test_create_session_validation(client):
    assert client.post("/api/session", json={"specialty": "   "}).status_code == 400
    assert client.post("/api/session", json={"specialty": ""}).status_code == 422
    assert client.post("/api/session", json={}).status_code == 422


def test_unknown_session_is_404(client):
    assert client.get("/api/session/missing").status_code == 404

    response = client.post("/api/chat", json={"session_id": "missing", "message": "hi"})
    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


def test_actions_return_only_ack(client):
    """Відповідь дії — підтвердження, транскрипт — лише через GET"""
    session_id = _create(client)["id"]

    ack = client.post("/api/chat", json={
        "session_id": session_id, "message": "What is the pain level?",
    }).json()
    assert ack["accepted"] is True
    assert ack["points_earned"] == 5
    assert "chat_history" not in ack

    history = client.get(f"/api/session/{session_id}").json()["chat_history"]
    assert [entry["type"] for entry in history] == ["user", "doctor"]
    assert "6/10" in history[1]["message"]


def test_irrelevant_question_loses_points(client):
    session_id = _create(client)["id"]

    ack = client.post("/api/chat", json={
        "session_id": session_id, "message": "Do you like football?",
    }).json()

    assert ack["points_earned"] == -2


def test_request_test_endpoint(client):
    session_id = _create(client, "cardiology")["id"]

    ack = client.post("/api/request-test", json={
        "session_id": session_id, "test_type": "ecg", "body_part": "chest",
    }).json()
    assert ack["cost"] == 90
    assert ack["points_earned"] == 10

    data = client.get(f"/api/session/{session_id}").json()
    entry = data["chat_history"][0]
    assert entry["type"] == "test_result"
    assert entry["is_appropriate"] is True
    assert data["total_cost"] == 90


def test_completed_session_rejects_actions(client):
    session_id = _create(client)["id"]

    ack = client.post("/api/submit-diagnosis", json={
        "session_id": session_id, "diagnosis": "Medial meniscus tear",
    }).json()
    assert ack["is_correct"] is True

    assert client.get(f"/api/session/{session_id}").json()["current_stage"] == "completed"

    response = client.post("/api/chat", json={"session_id": session_id, "message": "hi"})
    assert response.status_code == 400


# =============================================================================
# Клієнт + контролер поверх sandbox
# =============================================================================

def test_full_case_through_controller(controller):
    """Повний цикл: створення → питання → тест → хибний і правильний діагноз"""
    from med_sim.client import Action
    from med_sim.schemas import Stage

    session = controller.create_session("orthopedics")
    assert session.stage == Stage.ACTIVE

    session = controller.send_chat_message(session, "What is the patient's pain level?")
    session = controller.request_test(session, "mri", "knee")
    session = controller.submit_diagnosis(session, "ACL rupture")

    assert session.is_active
    assert session.diagnosis_attempts == 1

    session = controller.submit_diagnosis(session, "Meniscus tear")

    assert session.is_completed
    assert session.diagnosis_attempts == len(session.diagnosis_submissions) == 2
    assert session.total_points == 5 + 10 - 10 + 50
    assert session.total_cost == 1200
    assert controller.permitted_actions(session) == frozenset()
    assert not controller.can(Action.ORDER_TEST, session)

    stamps = [entry.timestamp for entry in session.transcript]
    assert stamps == sorted(stamps)

    print(f"✓ Case finished: {session!r}")


def test_backend_rejection_becomes_request_failed(controller):
    from med_sim.errors import RequestFailed
    from med_sim.schemas import Session

    ghost = Session(id="missing", specialty="cardiology")

    with pytest.raises(RequestFailed) as exc_info:
        controller.send_chat_message(ghost, "hello")

    assert exc_info.value.status_code == 404
    assert "not found" in controller.error
    assert not controller.busy


def test_scoring_rules_through_client(controller):
    rules = controller.load_scoring_rules()

    assert rules.correct_diagnosis == 50
    assert rules.incorrect_test_order == -5


def demo():
    """Демонстрація sandbox"""
    from med_sim.client import CaseAPIClient, SessionController

    print("=" * 60)
    print("MedSim — Демонстрація sandbox API")
    print("=" * 60)

    with TestClient(app) as client:
        api = CaseAPIClient(ClientConfig(backend_url="http://testserver"), http=client)
        controller = SessionController(api=api)

        session = controller.create_session("cardiology")
        print(session.scenario)

        session = controller.send_chat_message(session, "Where does the pain radiate?")
        session = controller.request_test(session, "ecg", "chest")
        session = controller.submit_diagnosis(session, "Inferior STEMI")

        for entry in session.transcript:
            print(f"  [{entry.kind.value}] {entry.timestamp:%H:%M:%S}")
        print(f"Final: {session!r}")


if __name__ == "__main__":
    demo()
