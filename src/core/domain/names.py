"""
NameTable — Таблица имён месяцев и дней недели

Injected capability вместо platform locale API:
- 12 длинных и 12 коротких имён месяцев (JANUARY first)
- 7 длинных и 7 коротких имён дней недели (SUNDAY first)

Поведение детерминировано и не зависит от locale хоста.
Кастомные таблицы загружаются через from_mapping с проверкой JSON Schema контракта.
"""

from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator

from src.core.contracts import validate_name_table


# =============================================================================
# NAME TABLE MODEL
# =============================================================================


class NameTable(BaseModel):
    """
    Immutable таблица имён.

    Индексация:
    - месяцы: index 1..12 → позиция index - 1
    - дни недели: index 1 (SUNDAY) .. 7 (SATURDAY) → позиция index - 1
    """

    months: tuple[str, ...] = Field(
        ..., min_length=12, max_length=12, description="Длинные имена месяцев"
    )
    short_months: tuple[str, ...] = Field(
        ..., min_length=12, max_length=12, description="Короткие имена месяцев"
    )
    weekdays: tuple[str, ...] = Field(
        ..., min_length=7, max_length=7, description="Длинные имена дней (Sunday first)"
    )
    short_weekdays: tuple[str, ...] = Field(
        ..., min_length=7, max_length=7, description="Короткие имена дней (Sunday first)"
    )

    model_config = {"frozen": True}

    @field_validator("months", "short_months", "weekdays", "short_weekdays")
    @classmethod
    def validate_unique_names(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Имена внутри одной группы должны быть непустыми и уникальными без учёта регистра"""
        keys = [name.strip().casefold() for name in v]
        if any(not key for key in keys):
            raise ValueError("names must be non-empty")
        if len(set(keys)) != len(keys):
            raise ValueError(f"names must be unique (case-insensitive): {v}")
        return v

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NameTable":
        """
        Построение таблицы из JSON-подобного payload.

        Raises:
            jsonschema.ValidationError: Если payload нарушает контракт name_table
        """
        validate_name_table(dict(data))
        return cls.model_validate(data)

    # -------------------------------------------------------------------------
    # Рендеринг
    # -------------------------------------------------------------------------

    def month_name(self, index: int, short: bool = False) -> str:
        names = self.short_months if short else self.months
        return names[int(index) - 1]

    def weekday_name(self, index: int, short: bool = False) -> str:
        names = self.short_weekdays if short else self.weekdays
        return names[int(index) - 1]

    # -------------------------------------------------------------------------
    # Поиск (case-insensitive, long или short)
    # -------------------------------------------------------------------------

    def find_month_index(self, text: str) -> int | None:
        """Индекс месяца (1..12) по имени или аббревиатуре, None если не найден"""
        return _find_index(text, self.months, self.short_months)

    def find_weekday_index(self, text: str) -> int | None:
        """Индекс дня недели (1..7, SUNDAY = 1) по имени или аббревиатуре"""
        return _find_index(text, self.weekdays, self.short_weekdays)


def _find_index(text: str, long_names: tuple[str, ...], short_names: tuple[str, ...]) -> int | None:
    key = text.strip().casefold()
    for index, (long_name, short_name) in enumerate(zip(long_names, short_names), start=1):
        if key == long_name.casefold() or key == short_name.casefold():
            return index
    return None


# =============================================================================
# DEFAULT TABLE
# =============================================================================

ENGLISH_NAMES = NameTable(
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    short_months=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekdays=(
        "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
    ),
    short_weekdays=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
)
