"""
MedSim — Каталог обстежень

Типи обстежень, які пропонує форма замовлення.
Значення — те, що йде на backend у test_type.
"""

from typing import Dict, List, Tuple

TEST_TYPES: List[Tuple[str, str]] = [
    ("x-ray", "X-Ray"),
    ("mri", "MRI"),
    ("ct_scan", "CT Scan"),
    ("blood_test", "Blood Test"),
    ("ultrasound", "Ultrasound"),
    ("ecg", "ECG"),
    ("echo", "Echocardiogram"),
]

_LABELS: Dict[str, str] = dict(TEST_TYPES)


def label_for_test_type(test_type: str) -> str:
    """
    Назва обстеження для заголовка.

    Невідомі типи: "_" → пробіл, кожне слово з великої літери.
    """
    if test_type in _LABELS:
        return _LABELS[test_type]
    return " ".join(word.capitalize() for word in test_type.replace("_", " ").split())

