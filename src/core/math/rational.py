"""
Rational Arithmetic — НОД/НОК для вещественных операндов

Алгоритм Евклида, применённый напрямую к float:
    while b != 0: a, b = b, fmod(a, b)
    gcd = |a|

fmod вычисляется точно, поэтому последовательность остатков строго
убывает и цикл конечен. Тем не менее для плохо масштабированных входов
число итераций может быть велико: оно ограничено GCD_MAX_ITERATIONS.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(a, b) >= 0 и gcd(a, b) == gcd(b, a)
2. lcm(a, b) × gcd(a, b) == |a × b| для ненулевых целочисленных a, b
3. lcm(0, 0) = NaN (неопределённость 0/0), исключение не поднимается
4. NaN/Inf на входе → ValueError (fail-fast)
"""

import logging
import math
from typing import Final

from src.core.math.numerical_safeguards import validate_finite

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Предел итераций цикла Евклида
GCD_MAX_ITERATIONS: Final[int] = 10_000


# =============================================================================
# EXCEPTIONS
# =============================================================================


class GcdNonConvergence(ArithmeticError):
    """Цикл Евклида не сошёлся за допустимое число итераций."""

    def __init__(self, message: str, iterations: int):
        super().__init__(message)
        self.iterations = iterations


# =============================================================================
# GCD / LCM
# =============================================================================


def gcd(a: float, b: float, max_iterations: int = GCD_MAX_ITERATIONS) -> float:
    """
    Наибольший общий делитель двух вещественных чисел.

    Args:
        a: Первый операнд
        b: Второй операнд
        max_iterations: Предел итераций (default: GCD_MAX_ITERATIONS)

    Returns:
        Неотрицательный НОД; gcd(0, 0) = 0

    Raises:
        ValueError: Если операнд NaN/Inf или max_iterations < 1
        GcdNonConvergence: Если предел итераций исчерпан

    Examples:
        >>> gcd(12, 18)
        6.0
        >>> gcd(-12, 18)
        6.0
        >>> gcd(1.5, 0.5)
        0.5
    """
    validate_finite(a, "a")
    validate_finite(b, "b")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")

    a, b = float(a), float(b)
    iterations = 0

    while b != 0.0:
        if iterations >= max_iterations:
            logger.warning(
                "gcd did not converge after %d iterations (a=%r, b=%r)",
                iterations, a, b,
            )
            raise GcdNonConvergence(
                f"Euclidean loop exceeded {max_iterations} iterations "
                f"(remainders a={a!r}, b={b!r})",
                iterations=iterations,
            )
        a, b = b, math.fmod(a, b)
        iterations += 1

    return abs(a)


def lcm(a: float, b: float, max_iterations: int = GCD_MAX_ITERATIONS) -> float:
    """
    Наименьшее общее кратное: |a × b| / gcd(a, b).

    Returns:
        НОК; NaN если оба операнда равны нулю

    Raises:
        ValueError: Если операнд NaN/Inf
        GcdNonConvergence: Если gcd не сошёлся

    Examples:
        >>> lcm(4, 6)
        12.0
        >>> lcm(0, 5)
        0.0
    """
    divisor = gcd(a, b, max_iterations=max_iterations)

    if divisor == 0.0:
        # Оба операнда нулевые: 0/0
        return math.nan

    return abs(float(a) * float(b)) / divisor
