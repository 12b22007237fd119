"""
Month — Закрытое множество из 12 месяцев

Каждый месяц несёт 1-based индекс и фиксированную (невисокосную) длину.
Lookup по индексу и по имени/аббревиатуре через injected NameTable.
"""

from enum import Enum

from src.core.domain.names import ENGLISH_NAMES, NameTable
from src.core.math.calendar_math import (
    LAST_DAY_OF_MONTH,
    InvalidIndex,
    UnrecognizedName,
)


class Month(int, Enum):
    """Месяц года (JANUARY = 1 ... DECEMBER = 12)"""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def index(self) -> int:
        return self.value

    @property
    def last_day(self) -> int:
        """Длина месяца в невисокосном году"""
        return LAST_DAY_OF_MONTH[self.value]

    @classmethod
    def from_index(cls, index: int) -> "Month":
        """
        Raises:
            InvalidIndex: Если index вне 1..12
        """
        try:
            return cls(index)
        except ValueError:
            raise InvalidIndex(f"Invalid month index {index} (invalid_month_index)") from None

    @classmethod
    def parse(cls, text: str, names: NameTable = ENGLISH_NAMES) -> "Month":
        """
        Месяц по длинному/короткому имени (case-insensitive) или по числовой строке.

        Examples:
            >>> Month.parse("January") is Month.parse("jan") is Month.parse("1")
            True

        Raises:
            UnrecognizedName: Если строка не имя месяца и не валидный индекс
        """
        index = names.find_month_index(text)
        if index is not None:
            return cls(index)

        stripped = text.strip()
        if stripped.isdigit():
            try:
                return cls.from_index(int(stripped))
            except InvalidIndex as e:
                raise UnrecognizedName(
                    f"{text!r} is not a valid month string (unrecognized_month_name)"
                ) from e

        raise UnrecognizedName(f"{text!r} is not a valid month string (unrecognized_month_name)")

    def display_name(self, names: NameTable = ENGLISH_NAMES, short: bool = False) -> str:
        return names.month_name(self.value, short=short)
