"""
Domain models and value objects.

Contains fundamental calendar entities: Month, Weekday, RangeBoundary, NameTable, OrdinalDate.
"""

from src.core.domain.month import Month
from src.core.domain.names import ENGLISH_NAMES, NameTable
from src.core.domain.ordinal_date import DayDate, OrdinalDate, calc_serial, split_serial
from src.core.domain.range_boundary import RangeBoundary, is_in_range
from src.core.domain.weekday import WeekInMonth, Weekday, weekday_from_anchor

__all__ = [
    # Names module
    "ENGLISH_NAMES",
    "NameTable",
    # Enums
    "Month",
    "Weekday",
    "WeekInMonth",
    "weekday_from_anchor",
    # Range boundary
    "RangeBoundary",
    "is_in_range",
    # Ordinal date
    "DayDate",
    "OrdinalDate",
    "calc_serial",
    "split_serial",
]
