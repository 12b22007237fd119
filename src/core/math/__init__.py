"""
Core math modules для daydate

Календарные примитивы: високосные годы, длины месяцев, валидация диапазонов.
"""

from src.core.math.calendar_math import (
    # Range constants
    DAYS_IN_WEEK,
    EARLIEST_DATE_ORDINAL,
    LATEST_DATE_ORDINAL,
    MAXIMUM_YEAR_SUPPORTED,
    MINIMUM_YEAR_SUPPORTED,
    MONTHS_IN_YEAR,
    # Month tables
    AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH,
    LAST_DAY_OF_MONTH,
    LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH,
    # Exceptions
    CalendarError,
    DateOutOfRange,
    InvalidIndex,
    UnrecognizedName,
    # Functions
    aggregate_days_table,
    is_leap_year,
    last_day_of_month,
    leap_year_count_through,
    # Validation
    validate_day,
    validate_ordinal,
    validate_year,
)

__all__ = [
    # Calendar Math — Range constants
    "DAYS_IN_WEEK",
    "EARLIEST_DATE_ORDINAL",
    "LATEST_DATE_ORDINAL",
    "MAXIMUM_YEAR_SUPPORTED",
    "MINIMUM_YEAR_SUPPORTED",
    "MONTHS_IN_YEAR",
    # Calendar Math — Month tables
    "AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH",
    "LAST_DAY_OF_MONTH",
    "LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH",
    # Calendar Math — Exceptions
    "CalendarError",
    "DateOutOfRange",
    "InvalidIndex",
    "UnrecognizedName",
    # Calendar Math — Functions
    "aggregate_days_table",
    "is_leap_year",
    "last_day_of_month",
    "leap_year_count_through",
    # Calendar Math — Validation
    "validate_day",
    "validate_ordinal",
    "validate_year",
]
