"""
SI Prefix — таблицы SI-префиксов и масштабирование по шагу экспоненты

Единственный допустимый источник соответствия:
    exponent_step (кратно 3, в [-24, 24], кроме 0) → символ SI-префикса

Таблицы строятся один раз при импорте и доступны только на чтение
(MappingProxyType), поэтому безопасны для конкурентного использования.

ВНИМАНИЕ: исторически таблица содержала коллизию -18 → "p" (вместо "a",
atto). По умолчанию используется исправленная таблица; историческая
доступна через PrefixTableVariant.LEGACY для побайтовой совместимости.
"""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MIN_EXPONENT_STEP: Final[int] = -24
MAX_EXPONENT_STEP: Final[int] = 24

# Разделитель между числом и символом префикса: "1.5 k"
UNIT_SEPARATOR: Final[str] = " "

# Выше этого порога целые float не переводятся в int при выводе
_INTEGRAL_RENDER_LIMIT: Final[float] = 1e16

# Максимальная степень 10, представимая как float за один шаг масштабирования
_MAX_SINGLE_SCALE: Final[int] = 300


# =============================================================================
# ТАБЛИЦЫ ПРЕФИКСОВ
# =============================================================================

PREFIX_TABLE: Final[Mapping[int, str]] = MappingProxyType(
    {
        -24: "y",
        -21: "z",
        -18: "a",
        -15: "f",
        -12: "p",
        -9: "n",
        -6: "μ",
        -3: "m",
        3: "k",
        6: "M",
        9: "G",
        12: "T",
        15: "P",
        18: "E",
        21: "Z",
        24: "Y",
    }
)

# Историческая таблица: -18 и -12 обе дают "p", atto недостижим
LEGACY_PREFIX_TABLE: Final[Mapping[int, str]] = MappingProxyType(
    {**PREFIX_TABLE, -18: "p"}
)


class PrefixTableVariant(str, Enum):
    """Вариант таблицы префиксов"""

    STANDARD = "standard"
    LEGACY = "legacy"


_TABLES: Final[Mapping[PrefixTableVariant, Mapping[int, str]]] = MappingProxyType(
    {
        PrefixTableVariant.STANDARD: PREFIX_TABLE,
        PrefixTableVariant.LEGACY: LEGACY_PREFIX_TABLE,
    }
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EngineeringConfig:
    """Конфигурация инженерного форматирования.

    Attributes:
        table: вариант таблицы префиксов (default: STANDARD)
        separator: разделитель числа и символа (default: UNIT_SEPARATOR)
    """

    table: PrefixTableVariant = PrefixTableVariant.STANDARD
    separator: str = UNIT_SEPARATOR

    @property
    def prefixes(self) -> Mapping[int, str]:
        return prefix_table(self.table)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedMagnitude(LookupError):
    """
    Шаг экспоненты отсутствует в таблице префиксов.

    Покрывает exponent_step = 0 (нет символа для базовой единицы),
    |exponent_step| > 24, а также ноль и NaN/Inf на входе.
    """

    def __init__(self, message: str, exponent_step: int | None = None):
        super().__init__(message)
        self.exponent_step = exponent_step


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def prefix_table(variant: PrefixTableVariant = PrefixTableVariant.STANDARD) -> Mapping[int, str]:
    """Read-only таблица префиксов для заданного варианта."""
    return _TABLES[PrefixTableVariant(variant)]


def symbol_for(exponent_step: int, table: Mapping[int, str] = PREFIX_TABLE) -> str:
    """
    Символ SI-префикса для шага экспоненты.

    Args:
        exponent_step: Шаг экспоненты (кратный 3)
        table: Таблица префиксов (default: PREFIX_TABLE)

    Returns:
        Односимвольный префикс ("k", "μ", ...)

    Raises:
        UnsupportedMagnitude: Если шага нет в таблице (включая 0)

    Examples:
        >>> symbol_for(3)
        'k'
        >>> symbol_for(-6)
        'μ'
    """
    try:
        return table[exponent_step]
    except KeyError:
        raise UnsupportedMagnitude(
            f"No SI prefix for exponent step {exponent_step} "
            f"(supported: {MIN_EXPONENT_STEP}..{MAX_EXPONENT_STEP}, multiples of 3, except 0)",
            exponent_step=exponent_step,
        ) from None


def _power_of_ten(exponent: int) -> float:
    """Ближайший к 10^exponent float (как у литерала 1eN)."""
    return float(f"1e{exponent}")


def base_value(value: float, exponent_step: int) -> float:
    """
    Мантисса: value × 10^(−exponent_step).

    Делитель 10^step берётся как корректно округлённый литерал 1eN,
    поэтому точные степени 10 дают мантиссу ровно 1 (1e-24 → 1 y),
    а 1500 / 1e3 даёт ровно 1.5.

    Examples:
        >>> base_value(1500.0, 3)
        1.5
        >>> base_value(0.0025, -3)
        2.5
        >>> base_value(1e-24, -24)
        1.0
    """
    # 1e-324 и меньше уже не представимы; subnormal значения масштабируются в два шага
    if exponent_step < -_MAX_SINGLE_SCALE:
        value *= _power_of_ten(_MAX_SINGLE_SCALE)
        exponent_step += _MAX_SINGLE_SCALE
    return value / _power_of_ten(exponent_step)


def render_number(value: float) -> str:
    """
    Текстовое представление числа для отображения.

    Кратчайшее round-trip представление (repr); конечные целые значения
    выводятся без ".0".

    Examples:
        >>> render_number(1.0)
        '1'
        >>> render_number(2.5)
        '2.5'
        >>> render_number(float("inf"))
        'inf'
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < _INTEGRAL_RENDER_LIMIT:
        return str(int(value))
    return repr(value)
