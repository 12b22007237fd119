"""
Contract Validation Module

Модуль для валидации JSON контрактов (кастомные таблицы имён).
"""

from .validators import (
    ContractValidator,
    NameTableValidator,
    SchemaLoader,
    validate_name_table,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NameTableValidator",
    # Functions
    "validate_name_table",
]
