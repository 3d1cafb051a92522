"""
MedSim — Презентація

Чисті функції відображення сесії, без залежності від UI-фреймворку.

Компоненти:
- badges.py: стиль бейджа балів, рівень загальних балів
- catalog.py: каталог типів обстежень
- renderer.py: RenderedEntry, CaseSummary, форматування
"""

from .badges import (
    BadgeStyle,
    PointsBadge,
    PointsTier,
    points_badge_style,
    points_badge_label,
    total_points_tier,
)
from .catalog import TEST_TYPES, label_for_test_type
from .renderer import (
    PHYSICIAN_NAME,
    Indicator,
    RenderedEntry,
    CaseSummary,
    format_timestamp,
    format_cost,
    format_test_heading,
    stage_label,
    render_entry,
    render_transcript,
    build_summary,
    scoring_rules_lines,
)


__all__ = [
    # Badges
    "BadgeStyle",
    "PointsBadge",
    "PointsTier",
    "points_badge_style",
    "points_badge_label",
    "total_points_tier",

    # Catalog
    "TEST_TYPES",
    "label_for_test_type",

    # Renderer
    "PHYSICIAN_NAME",
    "Indicator",
    "RenderedEntry",
    "CaseSummary",
    "format_timestamp",
    "format_cost",
    "format_test_heading",
    "stage_label",
    "render_entry",
    "render_transcript",
    "build_summary",
    "scoring_rules_lines",
]
