"""DateOps — арифметика и навигация по датам.

Все операции выражены через ordinal и weekday anchor конкретного
представления (DayDate), поэтому не зависят от того, как дата хранится.
Новые даты создаются только через явно переданную стратегию (DateFactory).

Правила:
- add_days: ordinal + n, без clamp (диапазон проверяет конструктор)
- add_months / add_years: день clamp'ится к последнему дню результирующего
  месяца (31 May + 1 month = 30 June, 29 Feb 2004 + 1 year = 28 Feb 2005)
- previous/following_weekday: строго до/после базовой даты
- nearest_weekday: вперёд не более чем на 3 дня, иначе назад
"""

import datetime
from dataclasses import dataclass, field

from src.core.domain.month import Month
from src.core.domain.names import ENGLISH_NAMES, NameTable
from src.core.domain.ordinal_date import DayDate
from src.core.domain.range_boundary import RangeBoundary, is_in_range
from src.core.domain.weekday import WeekInMonth, Weekday, weekday_from_anchor
from src.core.math.calendar_math import DAYS_IN_WEEK, MONTHS_IN_YEAR, last_day_of_month
from src.dateops.factory import DateFactory, SpreadsheetDateFactory

# Максимальный сдвиг вперёд, при котором nearest_weekday ещё идёт в будущее
NEAREST_FORWARD_MAX_DAYS = 3


@dataclass(frozen=True)
class DateOps:
    """Операции над датами с явно внедрённой стратегией и таблицей имён.

    Stateless и immutable: один экземпляр можно разделять между потоками.
    """

    factory: DateFactory = field(default_factory=SpreadsheetDateFactory)
    names: NameTable = ENGLISH_NAMES

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    def make(self, day: int, month: Month | int, year: int) -> DayDate:
        return self.factory.make(day, month, year)

    def make_from_ordinal(self, ordinal: int) -> DayDate:
        return self.factory.make_from_ordinal(ordinal)

    def make_from_host_date(self, value: datetime.date) -> DayDate:
        return self.factory.make_from_host_date(value)

    # -------------------------------------------------------------------------
    # День недели
    # -------------------------------------------------------------------------

    def weekday(self, date: DayDate) -> Weekday:
        return weekday_from_anchor(date.ordinal, date.weekday_anchor())

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add_days(self, date: DayDate, days: int) -> DayDate:
        """Новая дата через days дней (может быть отрицательным).

        Raises:
            DateOutOfRange: Если результат вне поддерживаемого диапазона
        """
        return self.factory.make_from_ordinal(date.ordinal + days)

    def add_months(self, date: DayDate, months: int) -> DayDate:
        """Новая дата через months месяцев с clamp дня к концу месяца."""
        this_month_as_ordinal = MONTHS_IN_YEAR * date.year + date.month.index - 1
        result_month_as_ordinal = this_month_as_ordinal + months
        result_year = result_month_as_ordinal // MONTHS_IN_YEAR
        result_month = Month.from_index(result_month_as_ordinal % MONTHS_IN_YEAR + 1)
        result_day = _clamp_day(date.day, result_month, result_year)
        return self.factory.make(result_day, result_month, result_year)

    def add_years(self, date: DayDate, years: int) -> DayDate:
        """Новая дата через years лет; 29 Feb clamp'ится в невисокосный год."""
        result_year = date.year + years
        result_day = _clamp_day(date.day, date.month, result_year)
        return self.factory.make(result_day, date.month, result_year)

    # -------------------------------------------------------------------------
    # Навигация по дням недели
    # -------------------------------------------------------------------------

    def previous_weekday(self, date: DayDate, target: Weekday) -> DayDate:
        """Последняя дата строго ДО date, приходящаяся на target."""
        offset_to_target = target.index - self.weekday(date).index
        if offset_to_target >= 0:
            offset_to_target -= DAYS_IN_WEEK
        return self.add_days(date, offset_to_target)

    def following_weekday(self, date: DayDate, target: Weekday) -> DayDate:
        """Первая дата строго ПОСЛЕ date, приходящаяся на target."""
        offset_to_target = target.index - self.weekday(date).index
        if offset_to_target <= 0:
            offset_to_target += DAYS_IN_WEEK
        return self.add_days(date, offset_to_target)

    def nearest_weekday(self, date: DayDate, target: Weekday) -> DayDate:
        """Ближайшая к date дата на target (сама date, если она уже target).

        Вперёд идём при сдвиге 0..3, назад при сдвиге вперёд 4..6.
        """
        offset_to_future_target = (target.index - self.weekday(date).index) % DAYS_IN_WEEK
        offset_to_previous_target = offset_to_future_target - DAYS_IN_WEEK
        if offset_to_future_target > NEAREST_FORWARD_MAX_DAYS:
            return self.add_days(date, offset_to_previous_target)
        return self.add_days(date, offset_to_future_target)

    def weekday_in_month(
        self, week: WeekInMonth, weekday: Weekday, month: Month | int, year: int
    ) -> DayDate:
        """Дата n-го (или последнего) weekday в месяце.

        Examples:
            WeekInMonth.THIRD, Weekday.MONDAY, Month.JANUARY, 2024 → 15-Jan-2024
            WeekInMonth.LAST, Weekday.FRIDAY, Month.MAY, 2017 → 26-May-2017
        """
        if week is WeekInMonth.LAST:
            month_end = self.end_of_month(self.factory.make(1, month, year))
            offset_back = (self.weekday(month_end).index - weekday.index) % DAYS_IN_WEEK
            return self.add_days(month_end, -offset_back)

        month_start = self.factory.make(1, month, year)
        offset_forward = (weekday.index - self.weekday(month_start).index) % DAYS_IN_WEEK
        return self.add_days(month_start, offset_forward + DAYS_IN_WEEK * (week.index - 1))

    # -------------------------------------------------------------------------
    # Границы месяца
    # -------------------------------------------------------------------------

    def end_of_month(self, date: DayDate) -> DayDate:
        return self.factory.make(
            last_day_of_month(date.month, date.year), date.month, date.year
        )

    def start_of_month(self, date: DayDate) -> DayDate:
        return self.factory.make(1, date.month, date.year)

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def days_since(self, date: DayDate, other: DayDate) -> int:
        """Разница в днях: > 0 если date позже other."""
        return date.ordinal - other.ordinal

    def is_on(self, date: DayDate, other: DayDate) -> bool:
        return date.ordinal == other.ordinal

    def is_before(self, date: DayDate, other: DayDate) -> bool:
        return date.ordinal < other.ordinal

    def is_on_or_before(self, date: DayDate, other: DayDate) -> bool:
        return date.ordinal <= other.ordinal

    def is_after(self, date: DayDate, other: DayDate) -> bool:
        return date.ordinal > other.ordinal

    def is_on_or_after(self, date: DayDate, other: DayDate) -> bool:
        return date.ordinal >= other.ordinal

    def in_range(
        self,
        date: DayDate,
        d1: DayDate,
        d2: DayDate,
        boundary: RangeBoundary = RangeBoundary.CLOSED,
    ) -> bool:
        """Принадлежность date интервалу [d1, d2]; порядок d1/d2 не важен."""
        return is_in_range(date.ordinal, d1.ordinal, d2.ordinal, boundary)

    # -------------------------------------------------------------------------
    # Host boundary и отображение
    # -------------------------------------------------------------------------

    def to_host_date_tuple(self, date: DayDate) -> tuple[int, int, int, int, int, int]:
        """(year, month, day, 0, 0, 0): время суток по соглашению нулевое."""
        return (date.year, date.month.index, date.day, 0, 0, 0)

    def to_host_datetime(self, date: DayDate) -> datetime.datetime:
        return datetime.datetime(*self.to_host_date_tuple(date))

    def to_display_string(self, date: DayDate) -> str:
        """DD-MonthName-YYYY через настроенную таблицу имён."""
        return f"{date.day:02d}-{self.names.month_name(date.month.index)}-{date.year}"

    def month_name(self, month: Month, short: bool = False) -> str:
        return month.display_name(self.names, short=short)

    def weekday_name(self, weekday: Weekday, short: bool = False) -> str:
        return weekday.display_name(self.names, short=short)

    def parse_month(self, text: str) -> Month:
        return Month.parse(text, self.names)

    def parse_weekday(self, text: str) -> Weekday:
        return Weekday.parse(text, self.names)


def _clamp_day(day: int, month: Month, year: int) -> int:
    return min(day, last_day_of_month(month, year))
