"""
MedSim — Action Gate

Які дії доступні користувачу залежно від стадії сесії.

    active    → chat, order_test, submit_diagnosis
    completed → нічого (термінальна стадія)

Поки виконується інша операція (busy), не доступно нічого.
Шлюз — чиста функція від (stage, busy): без кешу та пам'яті,
його треба перераховувати в кожній точці рішення.
"""

from enum import Enum
from typing import FrozenSet, Optional

from med_sim.errors import ActionNotPermitted
from med_sim.schemas import Session, Stage


class Action(str, Enum):
    """Дії, що змінюють сесію"""
    CHAT = "chat"
    ORDER_TEST = "order_test"
    SUBMIT_DIAGNOSIS = "submit_diagnosis"


_PERMITTED = {
    Stage.ACTIVE: frozenset(Action),
    Stage.COMPLETED: frozenset(),
}


def permitted_actions(stage: Stage, busy: bool = False) -> FrozenSet[Action]:
    """Множина дозволених дій"""
    if busy:
        return frozenset()
    return _PERMITTED[stage]


def is_permitted(action: Action, stage: Stage, busy: bool = False) -> bool:
    return action in permitted_actions(stage, busy)


def check(action: Action, session: Optional[Session], busy: bool = False) -> None:
    """
    Перевірити дію перед мережевим викликом.

    Raises:
        ActionNotPermitted: немає сесії, сесія завершена або зайнята
    """
    if session is None:
        raise ActionNotPermitted(action.value, "no active session")
    if busy:
        raise ActionNotPermitted(action.value, "another operation is in progress")
    if not is_permitted(action, session.stage):
        raise ActionNotPermitted(action.value, f"session is {session.stage.value}")
