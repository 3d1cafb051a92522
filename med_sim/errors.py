"""
MedSim — Помилки клієнта

Таксономія:
- ValidationError: порожній/відсутній ввід, відхилено ДО мережевого виклику
- ActionNotPermitted: дію заборонено шлюзом (сесія завершена або зайнята)
- RequestFailed: мережева помилка, неуспішна відповідь або невалідний payload
"""

from typing import Optional


class MedSimError(Exception):
    """Базова помилка MedSim"""


class ValidationError(MedSimError):
    """Некоректний ввід користувача (мережевого виклику не було)"""


class ActionNotPermitted(ValidationError):
    """Дія недоступна на поточній стадії сесії"""

    def __init__(self, action: str, reason: str):
        self.action = action
        self.reason = reason
        super().__init__(f"Action '{action}' is not permitted: {reason}")


class RequestFailed(MedSimError):
    """Запит до backend не вдався"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is not None:
            return f"{message} (HTTP {self.status_code})"
        return message
