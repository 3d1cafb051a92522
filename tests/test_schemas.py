"""
Тести для модуля schemas

Запуск: pytest tests/test_schemas.py -v
Або демо: python tests/test_schemas.py
"""

from datetime import datetime, timedelta, timezone

import pytest

T0 = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


def _ts(seconds: int) -> str:
    return (T0 + timedelta(seconds=seconds)).isoformat()


def _payload(**overrides) -> dict:
    """Сесія у форматі backend"""
    data = {
        "id": "c0ffee",
        "specialty": "orthopedics",
        "scenario": "## Patient\nKnee pain",
        "current_stage": "active",
        "chat_history": [],
        "total_points": 0,
        "total_cost": 0,
        "diagnosis_attempts": 0,
    }
    data.update(overrides)
    return data


FULL_HISTORY = [
    {"type": "user", "timestamp": _ts(0), "message": "Pain level?", "points_earned": 5},
    {"type": "doctor", "timestamp": _ts(1), "message": "**6/10**"},
    {
        "type": "test_result", "timestamp": _ts(2),
        "test_type": "mri", "body_part": "knee", "cost": 1200,
        "results": "Meniscal tear", "is_appropriate": True,
        "reasoning": "Addresses the working diagnosis", "points_earned": 10,
    },
    {
        "type": "diagnosis_submission", "timestamp": _ts(3),
        "diagnosis": "Meniscus tear", "evaluation": "**Correct**",
        "attempt_number": 1, "is_correct": True, "points_earned": 50,
    },
]


def test_session_from_backend_payload():
    """Розбір сесії з wire-полями"""
    from med_sim.schemas import Session, Stage

    session = Session.model_validate(_payload(specialty="orthopedics"))

    assert session.id == "c0ffee"
    assert session.stage == Stage.ACTIVE
    assert session.transcript == ()
    assert session.total_points == 0
    assert session.total_cost == 0
    assert session.diagnosis_attempts == 0
    assert session.is_active and not session.is_completed

    print(f"✓ Session: {session!r}")


def test_transcript_variants():
    """Tagged union розрізняє всі чотири види"""
    from med_sim.schemas import (
        DiagnosisSubmission, DoctorReply, EntryKind, Session, TestResult, UserMessage,
    )

    session = Session.model_validate(_payload(
        chat_history=FULL_HISTORY,
        current_stage="completed",
        total_points=65,
        total_cost=1200,
        diagnosis_attempts=1,
    ))

    kinds = [type(entry) for entry in session.transcript]
    assert kinds == [UserMessage, DoctorReply, TestResult, DiagnosisSubmission]
    assert [entry.kind for entry in session.transcript] == list(EntryKind)

    test = session.test_results[0]
    assert test.cost == 1200
    assert test.is_appropriate is True
    assert test.image_url is None

    assert session.diagnosis_submissions[0].attempt_number == 1
    assert session.user_messages[0].points_earned == 5

    print(f"✓ Transcript: {[e.kind.value for e in session.transcript]}")


def test_optional_fields_absent():
    """Необов'язкові поля лишаються None, 0 не плутається з None"""
    from med_sim.schemas import Session

    session = Session.model_validate(_payload(chat_history=[
        {"type": "user", "timestamp": _ts(0), "message": "Hi"},
        {"type": "user", "timestamp": _ts(1), "message": "Any fever?", "points_earned": 0},
        {
            "type": "test_result", "timestamp": _ts(2),
            "test_type": "blood_test", "body_part": "", "cost": 60, "results": "normal",
        },
    ]))

    first, second, test = session.transcript
    assert first.points_earned is None
    assert second.points_earned == 0
    assert test.is_appropriate is None
    assert test.reasoning is None
    assert test.body_part == ""


def test_stage_decoding():
    """Все, крім "completed", — active"""
    from med_sim.schemas import Session, Stage

    for raw, expected in [
        ("active", Stage.ACTIVE),
        ("completed", Stage.COMPLETED),
        ("Completed", Stage.COMPLETED),
        ("initial", Stage.ACTIVE),
        ("history_taking", Stage.ACTIVE),
    ]:
        assert Session.model_validate(_payload(current_stage=raw)).stage == expected

    print("✓ Stage decoding")


def test_attempts_must_match_submissions():
    """diagnosis_attempts = кількість спроб у транскрипті"""
    from pydantic import ValidationError
    from med_sim.schemas import Session

    with pytest.raises(ValidationError, match="diagnosis_attempts"):
        Session.model_validate(_payload(chat_history=FULL_HISTORY, diagnosis_attempts=2))

    with pytest.raises(ValidationError, match="diagnosis_attempts"):
        Session.model_validate(_payload(diagnosis_attempts=1))


def test_transcript_must_be_chronological():
    """Записи не можуть іти назад у часі; рівний час — допустимо"""
    from pydantic import ValidationError
    from med_sim.schemas import Session

    same_time = [
        {"type": "user", "timestamp": _ts(5), "message": "a"},
        {"type": "doctor", "timestamp": _ts(5), "message": "b"},
    ]
    assert len(Session.model_validate(_payload(chat_history=same_time)).transcript) == 2

    backwards = [
        {"type": "user", "timestamp": _ts(5), "message": "a"},
        {"type": "doctor", "timestamp": _ts(4), "message": "b"},
    ]
    with pytest.raises(ValidationError, match="out of order"):
        Session.model_validate(_payload(chat_history=backwards))


def test_naive_timestamp_is_utc():
    """Час без зони вважається UTC і порівнюється з часом із зоною"""
    from med_sim.schemas import Session

    session = Session.model_validate(_payload(chat_history=[
        {"type": "user", "timestamp": "2025-03-01T09:00:00", "message": "a"},
        {"type": "doctor", "timestamp": _ts(1), "message": "b"},
    ]))

    first, second = session.transcript
    assert first.timestamp == T0
    assert first.timestamp.tzinfo is not None
    assert second.timestamp > first.timestamp


def test_unknown_entry_type_rejected():
    from pydantic import ValidationError
    from med_sim.schemas import Session

    with pytest.raises(ValidationError):
        Session.model_validate(_payload(chat_history=[
            {"type": "prescription", "timestamp": _ts(0), "drug": "aspirin"},
        ]))


def test_session_is_immutable():
    """Сесія — значення: змінити поле не можна"""
    from pydantic import ValidationError
    from med_sim.schemas import Session

    session = Session.model_validate(_payload())
    with pytest.raises(ValidationError):
        session.total_points = 100


def test_wire_roundtrip_uses_backend_names():
    """model_dump(by_alias=True) повертає назви backend"""
    from med_sim.schemas import Session

    session = Session.model_validate(_payload(chat_history=FULL_HISTORY[:2]))
    data = session.model_dump(by_alias=True, mode="json")

    assert data["current_stage"] == "active"
    assert len(data["chat_history"]) == 2
    assert data["chat_history"][0]["type"] == "user"
    assert Session.model_validate(data) == session


def test_scoring_rules():
    from med_sim.schemas import ScoringRules

    rules = ScoringRules.model_validate({
        "correct_test_order": 10, "correct_diagnosis": 50, "helpful_question": 5,
        "incorrect_test_order": -5, "incorrect_diagnosis": -10, "irrelevant_question": -2,
        "version": "ignored",
    })

    assert rules.correct_diagnosis == 50
    assert rules.irrelevant_question == -2
    print(f"✓ ScoringRules: {rules}")


def demo():
    """Демонстрація модуля schemas"""
    print("=" * 60)
    print("MedSim — Демонстрація модуля schemas")
    print("=" * 60)

    test_session_from_backend_payload()
    test_transcript_variants()
    test_stage_decoding()
    test_scoring_rules()

    print("\n" + "=" * 60)
    print("✅ Всі тести пройдено успішно!")
    print("=" * 60)


if __name__ == "__main__":
    demo()
