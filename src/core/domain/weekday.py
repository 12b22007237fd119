"""
Weekday — Закрытое множество из 7 дней недели

Нумерация spreadsheet/host-календаря: SUNDAY = 1 ... SATURDAY = 7.
День недели любого ordinal выводится из weekday anchor (день недели ordinal 0).

WeekInMonth — порядковый номер недели в месяце (FIRST..FOURTH, LAST).
"""

from enum import Enum

from src.core.domain.names import ENGLISH_NAMES, NameTable
from src.core.math.calendar_math import DAYS_IN_WEEK, InvalidIndex, UnrecognizedName


# =============================================================================
# ENUMS
# =============================================================================


class Weekday(int, Enum):
    """День недели"""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @property
    def index(self) -> int:
        return self.value

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        """
        Raises:
            InvalidIndex: Если index вне 1..7
        """
        try:
            return cls(index)
        except ValueError:
            raise InvalidIndex(f"Invalid weekday index {index} (invalid_weekday_index)") from None

    @classmethod
    def parse(cls, text: str, names: NameTable = ENGLISH_NAMES) -> "Weekday":
        """
        День недели по длинному/короткому имени (case-insensitive).

        Raises:
            UnrecognizedName: Если строка не совпадает ни с одним именем
        """
        index = names.find_weekday_index(text)
        if index is None:
            raise UnrecognizedName(
                f"{text!r} is not a valid weekday string (unrecognized_weekday_name)"
            )
        return cls(index)

    def display_name(self, names: NameTable = ENGLISH_NAMES, short: bool = False) -> str:
        return names.weekday_name(self.value, short=short)


class WeekInMonth(int, Enum):
    """Неделя в месяце. LAST = последнее вхождение дня недели в месяце"""

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    LAST = 0

    @property
    def index(self) -> int:
        return self.value

    @classmethod
    def from_index(cls, index: int) -> "WeekInMonth":
        try:
            return cls(index)
        except ValueError:
            raise InvalidIndex(
                f"Invalid week-in-month index {index} (invalid_week_in_month_index)"
            ) from None


# =============================================================================
# WEEKDAY ANCHOR
# =============================================================================


def weekday_from_anchor(ordinal: int, anchor: Weekday) -> Weekday:
    """
    День недели для ordinal при заданном anchor (день недели ordinal 0).

    offset = anchor.index - SUNDAY.index
    weekday_index = (ordinal + offset) mod 7, сдвинутый в индексное пространство от SUNDAY

    Examples:
        >>> weekday_from_anchor(2, Weekday.SATURDAY)  # 1-Jan-1900
        <Weekday.MONDAY: 2>
    """
    offset = anchor.index - Weekday.SUNDAY.index
    return Weekday((ordinal + offset) % DAYS_IN_WEEK + Weekday.SUNDAY.index)
