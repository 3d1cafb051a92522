"""
MedSim — Бейджі балів

Дві окремі шкали:
- points_badge_style: бали окремої події (знак числа)
- PointsTier: рівень загальної суми балів сесії (свої пороги)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BadgeStyle(str, Enum):
    """Стиль бейджа за знаком балів"""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    @property
    def color(self) -> str:
        """Колір для Streamlit (:green[...] тощо)"""
        return {
            BadgeStyle.POSITIVE: "green",
            BadgeStyle.NEGATIVE: "red",
            BadgeStyle.NEUTRAL: "gray",
        }[self]


def points_badge_style(points: Optional[int]) -> BadgeStyle:
    """
    Стиль бейджа балів.

    Однаковий для подій усіх видів і для загальної суми:
    +5 → positive, -3 → negative, 0 або None → neutral.
    """
    if points is None or points == 0:
        return BadgeStyle.NEUTRAL
    return BadgeStyle.POSITIVE if points > 0 else BadgeStyle.NEGATIVE


def points_badge_label(points: int) -> str:
    """+5 → "+5 pts", -3 → "-3 pts", 0 → "0 pts" """
    sign = "+" if points > 0 else ""
    return f"{sign}{points} pts"


@dataclass(frozen=True)
class PointsBadge:
    """Готовий до показу бейдж"""
    label: str
    style: BadgeStyle

    @classmethod
    def for_points(cls, points: Optional[int]) -> Optional["PointsBadge"]:
        """None, якщо бали не нараховувались (0 — це теж бейдж)"""
        if points is None:
            return None
        return cls(label=points_badge_label(points), style=points_badge_style(points))


class PointsTier(str, Enum):
    """Рівень загальної суми балів"""
    HIGHEST = "highest"    # > 100
    HIGH = "high"          # > 50
    POSITIVE = "positive"  # > 0
    NEGATIVE = "negative"  # < 0
    NEUTRAL = "neutral"    # == 0

    @classmethod
    def from_points(cls, points: int) -> "PointsTier":
        if points > 100:
            return cls.HIGHEST
        elif points > 50:
            return cls.HIGH
        elif points > 0:
            return cls.POSITIVE
        elif points < 0:
            return cls.NEGATIVE
        else:
            return cls.NEUTRAL

    @property
    def icon(self) -> str:
        return {
            PointsTier.HIGHEST: "🏅",
            PointsTier.HIGH: "🏆",
            PointsTier.POSITIVE: "⭐",
            PointsTier.NEGATIVE: "🎯",
            PointsTier.NEUTRAL: "🎯",
        }[self]

    @property
    def color(self) -> str:
        if self in (PointsTier.HIGHEST, PointsTier.HIGH, PointsTier.POSITIVE):
            return "green"
        if self == PointsTier.NEGATIVE:
            return "red"
        return "gray"


def total_points_tier(points: int) -> PointsTier:
    """120 → highest, 60 → high, 10 → positive, -10 → negative, 0 → neutral"""
    return PointsTier.from_points(points)
