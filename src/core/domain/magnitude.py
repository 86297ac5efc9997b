"""
Magnitude — Значение в инженерной нотации

Immutable Pydantic модель: исходное число и производные величины
(|value|, log10|value|, шаг экспоненты). Создаётся через
src.core.math.engineering.classify и после создания не изменяется.

ИНВАРИАНТЫ:
1. exponent_step всегда кратен 3
2. absolute_value == abs(value)
3. Для шага из таблицы префиксов: 1 <= |base_value| < 1000
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from pydantic import BaseModel, Field, field_validator

from src.core.domain.si_prefix import (
    PREFIX_TABLE,
    EngineeringConfig,
    UnsupportedMagnitude,
    base_value,
    render_number,
    symbol_for,
)


# =============================================================================
# FORMAT OUTCOME
# =============================================================================


class FormatKind(str, Enum):
    """Вариант результата форматирования"""

    FORMATTED = "formatted"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class FormatOutcome:
    """Результат форматирования: "<число> <символ>" либо исходное число."""

    kind: FormatKind
    text: str
    reason: str = ""  # Причина fallback, пусто для FORMATTED

    @property
    def is_fallback(self) -> bool:
        return self.kind is FormatKind.FALLBACK


# =============================================================================
# MAGNITUDE MODEL
# =============================================================================


class Magnitude(BaseModel):
    """
    Число, разложенное на шаг экспоненты и мантиссу.

    Для value = 0 decimal_exponent равен -inf, exponent_step = 0:
    символа для нулевого шага нет, поэтому symbol поднимает
    UnsupportedMagnitude, а форматирование выводит "0".
    """

    value: float = Field(..., description="Исходное значение")
    absolute_value: float = Field(..., ge=0, description="|value|")
    decimal_exponent: float = Field(
        ..., description="log10(|value|), -inf для нуля"
    )
    exponent_step: int = Field(
        ..., description="3 × floor(decimal_exponent / 3), с коррекцией округления"
    )

    model_config = {"frozen": True}

    @field_validator("absolute_value")
    @classmethod
    def validate_absolute_value(cls, v: float, info) -> float:
        """Проверка согласованности |value|"""
        if "value" in info.data and v != abs(info.data["value"]):
            raise ValueError(f"absolute_value {v} must equal abs(value) {abs(info.data['value'])}")
        return v

    @field_validator("exponent_step")
    @classmethod
    def validate_exponent_step(cls, v: int) -> int:
        """Шаг экспоненты кратен 3"""
        if v % 3 != 0:
            raise ValueError(f"exponent_step must be a multiple of 3, got {v}")
        return v

    @property
    def e(self) -> int:
        """Шаг экспоненты (короткое имя)."""
        return self.exponent_step

    @property
    def is_zero(self) -> bool:
        return self.value == 0.0

    @property
    def base_value(self) -> float:
        """Мантисса: value × 10^(−exponent_step)."""
        return base_value(self.value, self.exponent_step)

    @property
    def symbol(self) -> str:
        """
        Символ SI-префикса по стандартной таблице.

        Raises:
            UnsupportedMagnitude: Если шага нет в таблице или value = 0
        """
        return self.symbol_in(PREFIX_TABLE)

    @property
    def in_table(self) -> bool:
        return not self.is_zero and self.exponent_step in PREFIX_TABLE

    def symbol_in(self, table: Mapping[int, str]) -> str:
        """Символ SI-префикса по заданной таблице."""
        if self.is_zero:
            raise UnsupportedMagnitude("Zero has no SI prefix", exponent_step=self.exponent_step)
        return symbol_for(self.exponent_step, table)

    def render(self, config: EngineeringConfig | None = None) -> FormatOutcome:
        """
        Форматирование в вид "<base_value><separator><symbol>".

        Никогда не поднимает исключение: при отсутствии префикса
        возвращает FALLBACK с исходным числом.
        """
        config = config or EngineeringConfig()

        try:
            symbol = self.symbol_in(config.prefixes)
        except UnsupportedMagnitude as e:
            return FormatOutcome(FormatKind.FALLBACK, render_number(self.value), str(e))

        return FormatOutcome(
            FormatKind.FORMATTED,
            f"{render_number(self.base_value)}{config.separator}{symbol}",
        )

    def __str__(self) -> str:
        return self.render().text
