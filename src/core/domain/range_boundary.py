"""
RangeBoundary — Политики включения границ интервала

Четыре политики над (value, bound1, bound2). Границы могут быть переданы в
любом порядке: start = min(bound1, bound2), end = max(bound1, bound2).

| Policy       | Membership          |
|--------------|---------------------|
| OPEN         | start <  v <  end   |
| CLOSED_LEFT  | start <= v <  end   |
| CLOSED_RIGHT | start <  v <= end   |
| CLOSED       | start <= v <= end   |
"""

from enum import Enum


class RangeBoundary(str, Enum):
    """Политика включения концов интервала"""

    OPEN = "open"
    CLOSED_LEFT = "closed_left"
    CLOSED_RIGHT = "closed_right"
    CLOSED = "closed"


def is_in_range(value: int, bound1: int, bound2: int, boundary: RangeBoundary) -> bool:
    """
    Проверка принадлежности value интервалу по политике boundary.

    Args:
        value: Проверяемое значение (ordinal)
        bound1: Одна граница
        bound2: Другая граница (порядок не важен)
        boundary: Политика включения концов

    Returns:
        True если value внутри интервала
    """
    start = min(bound1, bound2)
    end = max(bound1, bound2)

    if boundary is RangeBoundary.OPEN:
        return start < value < end
    if boundary is RangeBoundary.CLOSED_LEFT:
        return start <= value < end
    if boundary is RangeBoundary.CLOSED_RIGHT:
        return start < value <= end
    if boundary is RangeBoundary.CLOSED:
        return start <= value <= end

    raise ValueError(f"Unknown range boundary: {boundary!r}")
