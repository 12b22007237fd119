"""
Тесты для DateFactory и конфигурации DateOps

Проверяет:
1. SpreadsheetDateFactory: конструирование по ordinal / тройке / host date
2. build_date_ops: выбор стратегии по имени, кастомная таблица имён, логирование
3. Отсутствие глобального изменяемого состояния (immutable DateOps)
"""

import dataclasses
import datetime
import logging

import pytest
from jsonschema import ValidationError as SchemaValidationError

from src.core.domain import ENGLISH_NAMES, Month, OrdinalDate
from src.core.math import DateOutOfRange
from src.dateops import (
    DEFAULT_FACTORY_NAME,
    FACTORIES,
    DateOps,
    DateOpsConfig,
    SpreadsheetDateFactory,
    build_date_ops,
)


@pytest.fixture
def french_name_table() -> dict:
    return {
        "months": [
            "janvier", "février", "mars", "avril", "mai", "juin",
            "juillet", "août", "septembre", "octobre", "novembre", "décembre",
        ],
        "short_months": [
            "janv.", "févr.", "mars.", "avr.", "mai.", "juin.",
            "juil.", "août.", "sept.", "oct.", "nov.", "déc.",
        ],
        "weekdays": ["dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi"],
        "short_weekdays": ["dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."],
    }


# =============================================================================
# FACTORY
# =============================================================================


class TestSpreadsheetDateFactory:
    """Тесты для SpreadsheetDateFactory"""

    def test_make_from_ordinal(self) -> None:
        factory = SpreadsheetDateFactory()
        assert factory.make_from_ordinal(2) == OrdinalDate.of(1, 1, 1900)

    def test_make(self) -> None:
        factory = SpreadsheetDateFactory()
        assert factory.make(9, Month.NOVEMBER, 2001).ordinal == 37204
        assert factory.make(9, 11, 2001).ordinal == 37204

    def test_make_from_host_date(self) -> None:
        factory = SpreadsheetDateFactory()
        assert factory.make_from_host_date(datetime.date(2001, 11, 9)) == OrdinalDate.of(9, 11, 2001)

    def test_make_from_host_datetime_drops_time(self) -> None:
        factory = SpreadsheetDateFactory()
        value = datetime.datetime(2001, 11, 9, 23, 59, 59)
        assert factory.make_from_host_date(value) == OrdinalDate.of(9, 11, 2001)

    def test_host_date_out_of_range(self) -> None:
        with pytest.raises(DateOutOfRange):
            SpreadsheetDateFactory().make_from_host_date(datetime.date(1899, 12, 31))

    def test_supported_years(self) -> None:
        factory = SpreadsheetDateFactory()
        assert factory.minimum_year == 1900
        assert factory.maximum_year == 9999

    def test_host_round_trip(self) -> None:
        """date → OrdinalDate → host tuple → date"""
        ops = DateOps()
        for host in (datetime.date(1900, 1, 1), datetime.date(2004, 2, 29), datetime.date(9999, 12, 31)):
            d = ops.make_from_host_date(host)
            assert datetime.date(*ops.to_host_date_tuple(d)[:3]) == host


# =============================================================================
# CONFIG
# =============================================================================


class TestBuildDateOps:
    """Тесты для build_date_ops"""

    def test_defaults(self) -> None:
        ops = build_date_ops()
        assert isinstance(ops.factory, SpreadsheetDateFactory)
        assert ops.names == ENGLISH_NAMES
        assert DEFAULT_FACTORY_NAME in FACTORIES

    def test_unknown_factory(self) -> None:
        with pytest.raises(ValueError, match="Unknown date factory"):
            build_date_ops(DateOpsConfig(factory="julian"))

    def test_custom_name_table(self, french_name_table: dict) -> None:
        ops = build_date_ops(DateOpsConfig(name_table=french_name_table))
        d = ops.make(9, 11, 2001)
        assert ops.to_display_string(d) == "09-novembre-2001"
        assert ops.parse_month("AOÛT") is Month.AUGUST

    def test_invalid_name_table_rejected(self, french_name_table: dict) -> None:
        french_name_table["weekdays"] = french_name_table["weekdays"][:6]
        with pytest.raises(SchemaValidationError):
            build_date_ops(DateOpsConfig(name_table=french_name_table))

    def test_logs_selection(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="src.dateops.config"):
            build_date_ops()
        assert "DateOps configured: factory=spreadsheet" in caplog.text

    def test_date_ops_immutable(self) -> None:
        ops = build_date_ops()
        with pytest.raises(dataclasses.FrozenInstanceError):
            ops.factory = SpreadsheetDateFactory()  # type: ignore[misc]

    def test_config_immutable(self) -> None:
        config = DateOpsConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.factory = "other"  # type: ignore[misc]
