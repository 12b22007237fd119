"""DateFactory — стратегия конструирования дат.

Вместо глобального переключаемого singleton стратегия передаётся явно
(DateOps.factory) и выбирается один раз при старте (build_date_ops).
"""

import datetime
from dataclasses import dataclass
from typing import Protocol

from src.core.domain.month import Month
from src.core.domain.ordinal_date import DayDate, OrdinalDate
from src.core.math.calendar_math import MAXIMUM_YEAR_SUPPORTED, MINIMUM_YEAR_SUPPORTED


class DateFactory(Protocol):
    """Контракт стратегии конструирования дат."""

    def make_from_ordinal(self, ordinal: int) -> DayDate: ...

    def make(self, day: int, month: Month | int, year: int) -> DayDate: ...

    def make_from_host_date(self, value: datetime.date) -> DayDate: ...

    @property
    def minimum_year(self) -> int: ...

    @property
    def maximum_year(self) -> int: ...


@dataclass(frozen=True)
class SpreadsheetDateFactory:
    """Стратегия для OrdinalDate (spreadsheet-нумерация, 1-Jan-1900 = 2)."""

    def make_from_ordinal(self, ordinal: int) -> OrdinalDate:
        return OrdinalDate.from_ordinal(ordinal)

    def make(self, day: int, month: Month | int, year: int) -> OrdinalDate:
        return OrdinalDate.of(day, month, year)

    def make_from_host_date(self, value: datetime.date) -> OrdinalDate:
        """
        Дата из datetime.date / datetime.datetime. Время суток и tzinfo отбрасываются.

        Raises:
            DateOutOfRange: Если год вне [1900, 9999]
        """
        return OrdinalDate.of(value.day, value.month, value.year)

    @property
    def minimum_year(self) -> int:
        return MINIMUM_YEAR_SUPPORTED

    @property
    def maximum_year(self) -> int:
        return MAXIMUM_YEAR_SUPPORTED
