"""
Calendar Math — Gregorian primitives для ordinal-дат

Чистые функции без состояния:
- Проверка високосного года (григорианское правило)
- Последний день месяца с учётом високосных лет
- Количество високосных лет в диапазоне [1900, year] (closed-form, без циклов)
- Валидация диапазонов year / day / ordinal

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. is_leap_year реализует ТОЛЬКО корректное григорианское правило (1900 не високосный)
2. Исторический quirk spreadsheet-нумерации (1900 как високосный) живёт в
   алгоритме конверсии serial ↔ (day, month, year), а НЕ в этом модуле
3. Все валидаторы бросают DateOutOfRange до любых вычислений
"""

from typing import Final

# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================

# 1-Jan-1900 = 2 (день 1 зарезервирован, никогда не создаётся)
EARLIEST_DATE_ORDINAL: Final[int] = 2

# 31-Dec-9999
LATEST_DATE_ORDINAL: Final[int] = 2_958_465

MINIMUM_YEAR_SUPPORTED: Final[int] = 1900
MAXIMUM_YEAR_SUPPORTED: Final[int] = 9999

DAYS_IN_WEEK: Final[int] = 7
MONTHS_IN_YEAR: Final[int] = 12


# =============================================================================
# ТАБЛИЦЫ МЕСЯЦЕВ
# =============================================================================

# Последний день месяца для невисокосного года, индекс = номер месяца (1..12)
LAST_DAY_OF_MONTH: Final[tuple[int, ...]] = (
    0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
)

# Сумма дней до конца предыдущего месяца, индекс = номер месяца (1..13)
AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH: Final[tuple[int, ...]] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365,
)

LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH: Final[tuple[int, ...]] = (
    0, 0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366,
)

FEBRUARY_INDEX: Final[int] = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalendarError(ValueError):
    """Базовая ошибка календарных вычислений."""


class DateOutOfRange(CalendarError):
    """
    Значение вне поддерживаемого диапазона.

    - year вне [1900, 9999]
    - day вне [1, last_day_of_month(month, year)]
    - ordinal вне [2, 2958465]

    Бросается при конструировании, до вычисления производных полей.
    """


class InvalidIndex(CalendarError):
    """Lookup Month/Weekday/WeekInMonth по целому вне допустимого множества."""


class UnrecognizedName(CalendarError):
    """Строка не совпадает ни с длинным, ни с коротким именем."""


# =============================================================================
# ВИСОКОСНЫЕ ГОДЫ
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Григорианское правило: делится на 4 и (не делится на 100 или делится на 400).

    Examples:
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1904)
        True
    """
    fourth = year % 4 == 0
    hundredth = year % 100 == 0
    fourth_hundredth = year % 400 == 0
    return fourth and (not hundredth or fourth_hundredth)


def last_day_of_month(month: int, year: int) -> int:
    """
    Номер последнего дня месяца с учётом високосного февраля.

    Args:
        month: Номер месяца (1..12) или Month
        year: Год

    Returns:
        28/29/30/31
    """
    last_day = LAST_DAY_OF_MONTH[int(month)]
    if int(month) == FEBRUARY_INDEX and is_leap_year(year):
        return last_day + 1
    return last_day


def leap_year_count_through(year: int) -> int:
    """
    Количество високосных лет в [1900, year] включительно.

    Closed-form: кратные 4 минус кратные 100 плюс кратные 400,
    со сдвигами так, что 1900 вклад не даёт (1900 не високосный).

    Args:
        year: Год (ожидается >= 1899)

    Returns:
        Количество високосных лет

    Examples:
        >>> leap_year_count_through(1899)
        0
        >>> leap_year_count_through(1904)
        1
        >>> leap_year_count_through(2000)
        25
    """
    leap4 = (year - 1896) // 4
    leap100 = (year - 1800) // 100
    leap400 = (year - 1600) // 400
    return leap4 - leap100 + leap400


def aggregate_days_table(year: int) -> tuple[int, ...]:
    """Таблица накопленных дней (leap или non-leap) для указанного года."""
    if is_leap_year(year):
        return LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH
    return AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_year(year: int) -> None:
    """
    Raises:
        DateOutOfRange: Если year вне [1900, 9999]
    """
    if not MINIMUM_YEAR_SUPPORTED <= year <= MAXIMUM_YEAR_SUPPORTED:
        raise DateOutOfRange(
            f"Year {year} must be in range {MINIMUM_YEAR_SUPPORTED} to "
            f"{MAXIMUM_YEAR_SUPPORTED} (date_out_of_range)"
        )


def validate_day(day: int, month: int, year: int) -> None:
    """
    Проверка day в [1, last_day_of_month(month, year)].

    Год должен быть уже провалидирован (validate_year).

    Raises:
        DateOutOfRange: Если day вне диапазона месяца
    """
    last_day = last_day_of_month(month, year)
    if not 1 <= day <= last_day:
        raise DateOutOfRange(
            f"Day {day} must be in range 1 to {last_day} for "
            f"{int(month):02d}/{year} (date_out_of_range)"
        )


def validate_ordinal(ordinal: int) -> None:
    """
    Raises:
        DateOutOfRange: Если ordinal вне [2, 2958465]
    """
    if not EARLIEST_DATE_ORDINAL <= ordinal <= LATEST_DATE_ORDINAL:
        raise DateOutOfRange(
            f"Ordinal {ordinal} must be in range {EARLIEST_DATE_ORDINAL} to "
            f"{LATEST_DATE_ORDINAL} (date_out_of_range)"
        )
