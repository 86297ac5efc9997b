"""
Order Statistics — Медиана через полную сортировку

Сложность O(n log n): медиана вычисляется сортировкой, без алгоритма
выбора за O(n). Для больших выборок используйте numpy.median.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат не зависит от порядка входа
2. Пустой вход → EmptyInput
3. NaN на входе → ValueError (полный порядок не определён)
"""

from typing import Iterable

from src.core.math.numerical_safeguards import validate_no_nan


class EmptyInput(ValueError):
    """Медиана пустой последовательности не определена."""


def is_odd(n: int) -> bool:
    """Нечётность через младший бит."""
    return (n & 0x01) == 0x01


def median(numbers: Iterable[float]) -> float:
    """
    Медиана последовательности вещественных чисел.

    Нечётная длина: средний элемент отсортированной последовательности.
    Чётная длина: среднее двух средних элементов (индексы n//2 − 1 и n//2).

    Args:
        numbers: Конечная последовательность (итерируется один раз)

    Returns:
        Медиана как float

    Raises:
        EmptyInput: Если последовательность пуста
        ValueError: Если содержит NaN

    Examples:
        >>> median([3, 1, 2])
        2.0
        >>> median([1, 2, 3, 4])
        2.5
    """
    values = [float(n) for n in numbers]

    if not values:
        raise EmptyInput("median() requires at least one value")

    validate_no_nan(values, "numbers")

    ordered = sorted(values)
    mid = len(ordered) // 2

    if is_odd(len(ordered)):
        return ordered[mid]

    # Половины складываются отдельно: сумма двух больших float переполняется
    return ordered[mid - 1] / 2.0 + ordered[mid] / 2.0
