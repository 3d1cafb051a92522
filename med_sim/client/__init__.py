"""
MedSim — Клієнт симуляції

Компоненти:
- gate.py: Action Gate — дозволені дії за стадією
- api_client.py: HTTP клієнт backend (requests)
- controller.py: SessionController — операції "змінити → перечитати"

Приклад використання:
    from med_sim.client import SessionController, Action

    controller = SessionController()
    session = controller.create_session("cardiology")

    if controller.can(Action.CHAT, session):
        session = controller.send_chat_message(session, "Any chest pain?")
"""

from .gate import (
    Action,
    permitted_actions,
    is_permitted,
    check,
)
from .api_client import CaseAPIClient
from .controller import SessionController


__all__ = [
    # Gate
    "Action",
    "permitted_actions",
    "is_permitted",
    "check",

    # Transport
    "CaseAPIClient",

    # Controller
    "SessionController",
]
