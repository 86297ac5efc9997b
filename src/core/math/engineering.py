"""
Engineering Scale — Инженерная нотация с SI-префиксами

Модуль переводит число в инженерную нотацию: мантисса в [1, 1000)
и шаг экспоненты, кратный 3, с символом SI-префикса:
- exponent_step: 3 × floor(log10|v| / 3) с коррекцией округления log10
- classify: построение Magnitude (fail-fast для NaN/Inf)
- try_format: tagged-результат FORMATTED | FALLBACK
- format_engineering: тотальная функция, всегда возвращает строку

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. exponent_step всегда кратен 3
2. Для шага из таблицы: 1 <= |base_value| < 1000
3. format_engineering никогда не поднимает исключение
4. Ноль: exponent_step = 0, символа нет, вывод "0"

ФОРМУЛЫ:
    decimal_exponent = log10(|v|)
    exponent_step = 3 × floor(decimal_exponent / 3)
    base_value = v × 10^(−exponent_step)
"""

import logging
import math

from src.core.domain.magnitude import FormatKind, FormatOutcome, Magnitude
from src.core.domain.si_prefix import (
    LEGACY_PREFIX_TABLE,
    MAX_EXPONENT_STEP,
    MIN_EXPONENT_STEP,
    PREFIX_TABLE,
    UNIT_SEPARATOR,
    EngineeringConfig,
    PrefixTableVariant,
    UnsupportedMagnitude,
    base_value,
    prefix_table,
    render_number,
    symbol_for,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXPONENT STEP
# =============================================================================


def exponent_step(value: float) -> int:
    """
    Шаг экспоненты: ближайшая снизу степень 10, кратная 3.

    log10 может ошибиться на 1 ulp рядом со степенями 10
    (например, 999.9999999999999), поэтому шаг корректируется так,
    чтобы мантисса попала в [1, 1000).

    Args:
        value: Ненулевое конечное значение

    Returns:
        Шаг экспоненты (кратный 3)

    Raises:
        UnsupportedMagnitude: Если value = 0 или NaN/Inf

    Examples:
        >>> exponent_step(1500.0)
        3
        >>> exponent_step(0.0025)
        -3
        >>> exponent_step(-42.0)
        0
    """
    if not math.isfinite(value):
        raise UnsupportedMagnitude(f"Exponent step is undefined for {value}")
    if value == 0.0:
        raise UnsupportedMagnitude("Exponent step is undefined for zero")

    step = int(math.floor(math.log10(abs(value)) / 3) * 3)

    mantissa = abs(base_value(value, step))
    if mantissa >= 1000.0:
        step += 3
    elif mantissa < 1.0:
        step -= 3

    return step


# =============================================================================
# CLASSIFY
# =============================================================================


def classify(value: float) -> Magnitude:
    """
    Построение Magnitude для значения.

    Ноль допустим: decimal_exponent = -inf, exponent_step = 0.

    Args:
        value: Любое конечное значение (включая 0, отрицательные, subnormal)

    Returns:
        Immutable Magnitude

    Raises:
        UnsupportedMagnitude: Если value равно NaN или ±Inf
        OverflowError: Если int не представим как float
    """
    value = float(value)

    if not math.isfinite(value):
        raise UnsupportedMagnitude(f"Cannot classify non-finite value {value}")

    if value == 0.0:
        return Magnitude(
            value=value,
            absolute_value=0.0,
            decimal_exponent=-math.inf,
            exponent_step=0,
        )

    absolute_value = abs(value)
    return Magnitude(
        value=value,
        absolute_value=absolute_value,
        decimal_exponent=math.log10(absolute_value),
        exponent_step=exponent_step(value),
    )


# =============================================================================
# FORMAT
# =============================================================================


def try_format(value: float, config: EngineeringConfig | None = None) -> FormatOutcome:
    """
    Форматирование с явным вариантом результата.

    Returns:
        FormatOutcome(FORMATTED, "1.5 k") либо
        FormatOutcome(FALLBACK, "<исходное число>", reason)
    """
    try:
        outcome = classify(value).render(config)
    except UnsupportedMagnitude as e:
        outcome = FormatOutcome(FormatKind.FALLBACK, render_number(value), str(e))
    except OverflowError as e:
        # int вне диапазона float: выводится как есть
        outcome = FormatOutcome(FormatKind.FALLBACK, str(value), str(e))

    if outcome.is_fallback:
        logger.debug("Engineering format fallback for %r: %s", value, outcome.reason)

    return outcome


def format_engineering(value: float, config: EngineeringConfig | None = None) -> str:
    """
    Инженерная запись числа с SI-префиксом.

    Тотальная функция: при отсутствии префикса (ноль, шаг 0,
    |шаг| > 24, NaN/Inf, int вне диапазона float) возвращает исходное
    число без суффикса.

    Examples:
        >>> format_engineering(1500.0)
        '1.5 k'
        >>> format_engineering(0.0025)
        '2.5 m'
        >>> format_engineering(1_000_000.0)
        '1 M'
        >>> format_engineering(42.0)
        '42'
    """
    return try_format(value, config).text


__all__ = [
    "LEGACY_PREFIX_TABLE",
    "MAX_EXPONENT_STEP",
    "MIN_EXPONENT_STEP",
    "PREFIX_TABLE",
    "UNIT_SEPARATOR",
    "EngineeringConfig",
    "FormatKind",
    "FormatOutcome",
    "Magnitude",
    "PrefixTableVariant",
    "UnsupportedMagnitude",
    "base_value",
    "classify",
    "exponent_step",
    "format_engineering",
    "prefix_table",
    "render_number",
    "symbol_for",
    "try_format",
]
