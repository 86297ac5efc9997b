"""
Numerical Safeguards — общие проверки float

Модуль содержит небольшие примитивы, которые используют все вычислительные
модули пакета:
- Проверка конечности значения (NaN/Inf)
- Fail-fast валидация скаляров и последовательностей
- Сравнение float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN никогда не попадает в сортировку или цикл Евклида
2. Ошибки валидации всегда ValueError с именем параметра в сообщении
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final, Iterable

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения float
# Используется в round-trip проверках base_value × 10^step
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечно, False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1500.0, 1.5 * 1e3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value равно NaN или ±Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a finite float (not NaN/Inf), got {value}")


def validate_no_nan(values: Iterable[float], name: str) -> None:
    """
    Валидация, что в последовательности нет NaN.

    ±Inf допустимы: они корректно упорядочиваются сортировкой,
    а NaN ломает полный порядок.

    Raises:
        ValueError: Если найден NaN (с указанием индекса)
    """
    for index, value in enumerate(values):
        if math.isnan(value):
            raise ValueError(f"{name}[{index}] is NaN; ordering is undefined")
