"""Time-range helpers shared by the market pulse prompt and its fallback."""

from __future__ import annotations

from datetime import datetime

MONTHS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")

POINTS_BY_RANGE: dict[str, int] = {"3M": 3, "6M": 6, "1Y": 12}
DEFAULT_POINTS = 6


def points_for_range(time_range: str | None) -> int:
    """Chart points for a range label; unknown labels count as 6M."""
    return POINTS_BY_RANGE.get((time_range or "").upper(), DEFAULT_POINTS)


def month_labels(points: int, now: datetime) -> list[str]:
    """``points`` consecutive month labels ending at the month of ``now``."""
    current = now.month - 1
    return [MONTHS[(current - (points - 1 - i)) % 12] for i in range(points)]
