"""DateOps — арифметика и навигация по датам поверх ordinal.

- DateOps: add_days/add_months/add_years, навигация по дням недели, сравнения, интервалы
- DateFactory: явно внедряемая стратегия конструирования дат
- build_date_ops: одноразовая конфигурация при старте
"""

from .config import (
    DEFAULT_FACTORY_NAME,
    FACTORIES,
    DateOpsConfig,
    build_date_ops,
)
from .factory import DateFactory, SpreadsheetDateFactory
from .operations import NEAREST_FORWARD_MAX_DAYS, DateOps

__all__ = [
    "DateOps",
    "NEAREST_FORWARD_MAX_DAYS",
    "DateFactory",
    "SpreadsheetDateFactory",
    "DateOpsConfig",
    "DEFAULT_FACTORY_NAME",
    "FACTORIES",
    "build_date_ops",
]
