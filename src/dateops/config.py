"""Конфигурация DateOps — одноразовый выбор стратегии при старте.

build_date_ops(config) возвращает immutable DateOps; глобального
изменяемого состояния нет.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Final, Mapping, Optional

from src.core.domain.names import ENGLISH_NAMES, NameTable
from src.dateops.factory import DateFactory, SpreadsheetDateFactory
from src.dateops.operations import DateOps

logger = logging.getLogger(__name__)


# Реестр стратегий по имени
FACTORIES: Final[Mapping[str, Callable[[], DateFactory]]] = {
    "spreadsheet": SpreadsheetDateFactory,
}

DEFAULT_FACTORY_NAME: Final[str] = "spreadsheet"


@dataclass(frozen=True)
class DateOpsConfig:
    """Конфигурация DateOps.

    - factory: имя стратегии из FACTORIES
    - name_table: payload кастомной таблицы имён (None = английские имена)
    """
    factory: str = DEFAULT_FACTORY_NAME
    name_table: Optional[Mapping[str, Any]] = None


def build_date_ops(config: Optional[DateOpsConfig] = None) -> DateOps:
    """
    Args:
        config: конфигурация (default: DateOpsConfig())

    Returns:
        DateOps с выбранной стратегией и таблицей имён

    Raises:
        ValueError: неизвестное имя стратегии
        jsonschema.ValidationError: name_table нарушает контракт
    """
    config = config or DateOpsConfig()

    try:
        factory = FACTORIES[config.factory]()
    except KeyError:
        raise ValueError(
            f"Unknown date factory {config.factory!r}, expected one of {sorted(FACTORIES)}"
        ) from None

    names: NameTable = ENGLISH_NAMES
    if config.name_table is not None:
        names = NameTable.from_mapping(config.name_table)

    logger.info(
        "DateOps configured: factory=%s, custom_names=%s",
        config.factory,
        config.name_table is not None,
    )
    return DateOps(factory=factory, names=names)
