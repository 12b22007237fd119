"""
Тесты для Month / Weekday / WeekInMonth и таблицы имён

Проверяет:
1. Индексы и фиксированные длины месяцев
2. Lookup по индексу (InvalidIndex)
3. Парсинг имён: case-insensitive, аббревиатуры, числовые строки (UnrecognizedName)
4. Weekday anchor → день недели
5. Injected NameTable (кастомные имена)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    ENGLISH_NAMES,
    Month,
    NameTable,
    WeekInMonth,
    Weekday,
    weekday_from_anchor,
)
from src.core.math import InvalidIndex, UnrecognizedName


@pytest.fixture
def german_names() -> NameTable:
    """Кастомная таблица имён"""
    return NameTable(
        months=(
            "Januar", "Februar", "März", "April", "Mai", "Juni",
            "Juli", "August", "September", "Oktober", "November", "Dezember",
        ),
        short_months=(
            "Jan", "Feb", "Mär", "Apr", "Mai", "Jun",
            "Jul", "Aug", "Sep", "Okt", "Nov", "Dez",
        ),
        weekdays=(
            "Sonntag", "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag",
        ),
        short_weekdays=("So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"),
    )


# =============================================================================
# MONTH
# =============================================================================


class TestMonth:
    """Тесты для Month"""

    def test_twelve_variants(self) -> None:
        assert len(Month) == 12
        assert [m.index for m in Month] == list(range(1, 13))

    def test_fixed_lengths(self) -> None:
        assert Month.JANUARY.last_day == 31
        assert Month.FEBRUARY.last_day == 28  # невисокосная длина
        assert Month.APRIL.last_day == 30
        assert Month.DECEMBER.last_day == 31

    def test_from_index(self) -> None:
        assert Month.from_index(1) is Month.JANUARY
        assert Month.from_index(12) is Month.DECEMBER

    @pytest.mark.parametrize("index", [0, 13, -1])
    def test_from_index_out_of_range(self, index: int) -> None:
        with pytest.raises(InvalidIndex, match="invalid_month_index"):
            Month.from_index(index)

    @pytest.mark.parametrize("text", ["January", "january", "JANUARY", "jan", "Jan", "1", " 1 "])
    def test_parse_january(self, text: str) -> None:
        assert Month.parse(text) is Month.JANUARY

    def test_parse_numeric(self) -> None:
        assert Month.parse("12") is Month.DECEMBER
        assert Month.parse("05") is Month.MAY

    @pytest.mark.parametrize("text", ["Janu", "", "month", "13", "0"])
    def test_parse_unrecognized(self, text: str) -> None:
        with pytest.raises(UnrecognizedName, match="unrecognized_month_name"):
            Month.parse(text)

    def test_parse_out_of_range_number_chained(self) -> None:
        """'13' это число, но не индекс месяца: UnrecognizedName поверх InvalidIndex"""
        with pytest.raises(UnrecognizedName) as exc_info:
            Month.parse("13")
        assert isinstance(exc_info.value.__cause__, InvalidIndex)

    def test_display_name(self) -> None:
        assert Month.DECEMBER.display_name() == "December"
        assert Month.DECEMBER.display_name(short=True) == "Dec"

    def test_custom_names(self, german_names: NameTable) -> None:
        assert Month.parse("märz", german_names) is Month.MARCH
        assert Month.parse("Okt", german_names) is Month.OCTOBER
        assert Month.MAY.display_name(german_names) == "Mai"
        with pytest.raises(UnrecognizedName):
            Month.parse("October", german_names)


# =============================================================================
# WEEKDAY
# =============================================================================


class TestWeekday:
    """Тесты для Weekday"""

    def test_sunday_first_numbering(self) -> None:
        assert Weekday.SUNDAY.index == 1
        assert Weekday.MONDAY.index == 2
        assert Weekday.SATURDAY.index == 7

    def test_from_index(self) -> None:
        assert Weekday.from_index(4) is Weekday.WEDNESDAY

    @pytest.mark.parametrize("index", [0, 8])
    def test_from_index_out_of_range(self, index: int) -> None:
        with pytest.raises(InvalidIndex, match="invalid_weekday_index"):
            Weekday.from_index(index)

    @pytest.mark.parametrize("text", ["Wednesday", "wednesday", "WEDNESDAY", "Wed", "wed"])
    def test_parse_wednesday(self, text: str) -> None:
        assert Weekday.parse(text) is Weekday.WEDNESDAY

    @pytest.mark.parametrize("text", ["Wedn", "4", ""])
    def test_parse_unrecognized(self, text: str) -> None:
        """Числовые строки для дней недели не принимаются"""
        with pytest.raises(UnrecognizedName, match="unrecognized_weekday_name"):
            Weekday.parse(text)

    def test_display_name(self) -> None:
        assert Weekday.SATURDAY.display_name() == "Saturday"
        assert Weekday.SATURDAY.display_name(short=True) == "Sat"

    def test_custom_names(self, german_names: NameTable) -> None:
        assert Weekday.parse("mittwoch", german_names) is Weekday.WEDNESDAY
        assert Weekday.parse("So", german_names) is Weekday.SUNDAY
        assert Weekday.FRIDAY.display_name(german_names, short=True) == "Fr"


class TestWeekInMonth:
    """Тесты для WeekInMonth"""

    def test_indices(self) -> None:
        assert [w.index for w in WeekInMonth] == [1, 2, 3, 4, 0]

    def test_from_index(self) -> None:
        assert WeekInMonth.from_index(0) is WeekInMonth.LAST
        with pytest.raises(InvalidIndex):
            WeekInMonth.from_index(5)


# =============================================================================
# WEEKDAY ANCHOR
# =============================================================================


class TestWeekdayFromAnchor:
    """Тесты для weekday_from_anchor"""

    def test_ordinal_zero_is_anchor(self) -> None:
        for anchor in Weekday:
            assert weekday_from_anchor(0, anchor) is anchor

    def test_saturday_anchor(self) -> None:
        """Spreadsheet-нумерация: 1-Jan-1900 (ordinal 2) приходится на понедельник"""
        assert weekday_from_anchor(2, Weekday.SATURDAY) is Weekday.MONDAY
        assert weekday_from_anchor(7, Weekday.SATURDAY) is Weekday.SATURDAY
        assert weekday_from_anchor(8, Weekday.SATURDAY) is Weekday.SUNDAY

    def test_weekly_cycle(self) -> None:
        for ordinal in range(2, 30):
            assert weekday_from_anchor(ordinal, Weekday.SATURDAY) is weekday_from_anchor(
                ordinal + 7, Weekday.SATURDAY
            )


# =============================================================================
# NAME TABLE
# =============================================================================


class TestNameTable:
    """Тесты для NameTable"""

    def test_english_defaults(self) -> None:
        assert ENGLISH_NAMES.month_name(1) == "January"
        assert ENGLISH_NAMES.month_name(9, short=True) == "Sep"
        assert ENGLISH_NAMES.weekday_name(1) == "Sunday"
        assert ENGLISH_NAMES.weekday_name(7, short=True) == "Sat"

    def test_find_indices(self) -> None:
        assert ENGLISH_NAMES.find_month_index("may") == 5
        assert ENGLISH_NAMES.find_weekday_index("THU") == 5
        assert ENGLISH_NAMES.find_month_index("nope") is None

    def test_immutable(self) -> None:
        with pytest.raises(ValidationError):
            ENGLISH_NAMES.months = ()  # type: ignore

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NameTable(
                months=ENGLISH_NAMES.months[:11],
                short_months=ENGLISH_NAMES.short_months,
                weekdays=ENGLISH_NAMES.weekdays,
                short_weekdays=ENGLISH_NAMES.short_weekdays,
            )

    def test_duplicate_names_rejected(self) -> None:
        """Одинаковые имена в группе сделали бы парсинг неоднозначным"""
        with pytest.raises(ValidationError, match="unique"):
            NameTable(
                months=ENGLISH_NAMES.months,
                short_months=ENGLISH_NAMES.short_months,
                weekdays=("Sunday", "sunday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
                short_weekdays=ENGLISH_NAMES.short_weekdays,
            )
