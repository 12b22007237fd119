"""
OrdinalDate — Immutable дата на основе serial-номера дня

Дата как целое число дней, аналогично spreadsheet-нумерации:
1-Jan-1900 = 2, 2-Jan-1900 = 3, ..., 31-Dec-9999 = 2958465.

Исторический quirk: spreadsheet считает 1900 високосным (это не так) и
нумерует 1-Jan-1900 как 1. Здесь 1-Jan-1900 = 2, поэтому номера расходятся
со spreadsheet только в январе-феврале 1900, а начиная с 1-Mar-1900 совпадают.
Сам предикат is_leap_year при этом корректный григорианский: quirk несёт
только формула конверсии (+1 и привязка leap_year_count_through).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ordinal ∈ [2, 2958465]
2. ordinal ↔ (day, month, year): биекция на всём диапазоне
3. day ∈ [1, last_day_of_month(month, year)], year ∈ [1900, 9999]
4. Равенство и порядок определяются только ordinal

ФОРМУЛЫ:
    yy = (year - 1900) * 365 + leap_year_count_through(year - 1)
    mm = AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH[month] (+1 после февраля високосного года)
    ordinal = yy + mm + day + 1
"""

import logging
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field, model_validator

from src.core.domain.month import Month
from src.core.domain.names import ENGLISH_NAMES, NameTable
from src.core.domain.weekday import Weekday, weekday_from_anchor
from src.core.math.calendar_math import (
    AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH,
    EARLIEST_DATE_ORDINAL,
    FEBRUARY_INDEX,
    LATEST_DATE_ORDINAL,
    MAXIMUM_YEAR_SUPPORTED,
    MINIMUM_YEAR_SUPPORTED,
    aggregate_days_table,
    is_leap_year,
    last_day_of_month,
    leap_year_count_through,
    validate_day,
    validate_ordinal,
    validate_year,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CAPABILITY
# =============================================================================


@runtime_checkable
class DayDate(Protocol):
    """
    Контракт конкретного представления даты для DateOps.

    Единственный обязательный метод: weekday_anchor(), день недели, на
    который пришёлся бы ordinal 0 в этом представлении.
    """

    ordinal: int
    day: int
    month: Month
    year: int

    def weekday_anchor(self) -> Weekday: ...


# =============================================================================
# SERIAL CONVERSION
# =============================================================================


def calc_serial(day: int, month: int, year: int) -> int:
    """
    Serial-номер по (day, month, year). 1-Jan-1900 = 2.

    Диапазоны не проверяются: вызывающий код валидирует входы заранее.
    """
    yy = (year - MINIMUM_YEAR_SUPPORTED) * 365 + leap_year_count_through(year - 1)
    mm = AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH[int(month)]
    if int(month) > FEBRUARY_INDEX and is_leap_year(year):
        mm += 1
    return yy + mm + day + 1


def split_serial(ordinal: int) -> tuple[int, int, int]:
    """
    Обратная конверсия: serial → (day, month_index, year).

    1. Оценка года: over-estimate игнорирует високосные дни, under-estimate
       вычитает их количество до over-estimate.
    2. Если оценки совпали, это и есть год. Иначе линейный поиск вперёд от
       under-estimate до первого года, чей 1-Jan превышает ordinal.
    3. Месяц: последний, чей накопленный конец ещё не достиг ordinal.
    4. day = остаток.

    Args:
        ordinal: Serial-номер, уже провалидированный (validate_ordinal)

    Returns:
        (day, month_index, year)
    """
    days = ordinal - EARLIEST_DATE_ORDINAL
    # over-estimate: високосные дни не учтены
    overestimated_year = MINIMUM_YEAR_SUPPORTED + days // 365
    nonleap_days = days - leap_year_count_through(overestimated_year)
    underestimated_year = MINIMUM_YEAR_SUPPORTED + nonleap_days // 365

    if underestimated_year == overestimated_year:
        year = underestimated_year
    else:
        logger.debug(
            "Year estimate mismatch for ordinal %d: %d..%d, searching forward",
            ordinal,
            underestimated_year,
            overestimated_year,
        )
        candidate = underestimated_year
        while calc_serial(1, Month.JANUARY, candidate) <= ordinal:
            candidate += 1
        year = candidate - 1

    year_start = calc_serial(1, Month.JANUARY, year)
    days_to_end_of_preceding_month = aggregate_days_table(year)

    month = 1
    month_end = year_start + days_to_end_of_preceding_month[month] - 1
    while month_end < ordinal:
        month += 1
        month_end = year_start + days_to_end_of_preceding_month[month] - 1
    month -= 1

    day = ordinal - year_start - days_to_end_of_preceding_month[month] + 1
    return day, month, year


# =============================================================================
# ORDINAL DATE MODEL
# =============================================================================


class OrdinalDate(BaseModel):
    """
    Дата как serial-номер дня плюс синхронизированная тройка (day, month, year).

    Immutable модель (frozen=True): любая арифметика создаёт новый экземпляр.
    Канонические конструкторы from_ordinal и of валидируют диапазоны
    (DateOutOfRange) до любой конверсии.
    """

    ordinal: int = Field(
        ...,
        ge=EARLIEST_DATE_ORDINAL,
        le=LATEST_DATE_ORDINAL,
        description="Serial-номер дня (1-Jan-1900 = 2)",
    )
    day: int = Field(..., ge=1, le=31, description="День месяца")
    month: Month = Field(..., description="Месяц")
    year: int = Field(
        ...,
        ge=MINIMUM_YEAR_SUPPORTED,
        le=MAXIMUM_YEAR_SUPPORTED,
        description="Год",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_serial_matches_triple(self) -> "OrdinalDate":
        """Обе репрезентации должны совпадать"""
        last_day = last_day_of_month(self.month, self.year)
        if self.day > last_day:
            raise ValueError(
                f"day {self.day} exceeds last day {last_day} of {self.month.name} {self.year}"
            )
        expected = calc_serial(self.day, self.month, self.year)
        if expected != self.ordinal:
            raise ValueError(
                f"ordinal {self.ordinal} does not match "
                f"{self.day:02d}-{self.month.index:02d}-{self.year} (expected {expected})"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "OrdinalDate":
        """
        Дата по serial-номеру.

        Raises:
            DateOutOfRange: Если ordinal вне [2, 2958465]
        """
        validate_ordinal(ordinal)
        day, month, year = split_serial(ordinal)
        return cls(ordinal=ordinal, day=day, month=Month(month), year=year)

    @classmethod
    def of(cls, day: int, month: Month | int, year: int) -> "OrdinalDate":
        """
        Дата по (day, month, year). month: Month или индекс 1..12.

        Raises:
            InvalidIndex: Если month-индекс вне 1..12
            DateOutOfRange: Если year или day вне диапазона
        """
        if not isinstance(month, Month):
            month = Month.from_index(month)
        validate_year(year)
        validate_day(day, month, year)
        return cls(ordinal=calc_serial(day, month, year), day=day, month=month, year=year)

    # -------------------------------------------------------------------------
    # Производные значения
    # -------------------------------------------------------------------------

    def weekday_anchor(self) -> Weekday:
        """В spreadsheet-нумерации ordinal 0 приходится на субботу"""
        return Weekday.SATURDAY

    @property
    def weekday(self) -> Weekday:
        return weekday_from_anchor(self.ordinal, self.weekday_anchor())

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    @property
    def last_day_of_month(self) -> int:
        return last_day_of_month(self.month, self.year)

    def to_display_string(self, names: NameTable = ENGLISH_NAMES) -> str:
        """Формат DD-MonthName-YYYY, например 09-November-2001"""
        return f"{self.day:02d}-{self.month.display_name(names)}-{self.year}"

    def __str__(self) -> str:
        return self.to_display_string()

    # -------------------------------------------------------------------------
    # Равенство и порядок (только ordinal)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrdinalDate):
            return self.ordinal == other.ordinal
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.ordinal)

    def __lt__(self, other: object) -> bool:
        if isinstance(other, OrdinalDate):
            return self.ordinal < other.ordinal
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, OrdinalDate):
            return self.ordinal <= other.ordinal
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, OrdinalDate):
            return self.ordinal > other.ordinal
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, OrdinalDate):
            return self.ordinal >= other.ordinal
        return NotImplemented
