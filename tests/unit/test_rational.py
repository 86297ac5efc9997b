"""
Тесты для Rational Arithmetic — НОД/НОК для вещественных операндов

Проверяемые инварианты:
1. gcd неотрицателен и симметричен
2. lcm × gcd == |a × b| для ненулевых целочисленных пар
3. lcm(0, 0) = NaN без исключения
4. Предел итераций → GcdNonConvergence
5. NaN/Inf → ValueError
"""

import logging
import math

import pytest

from src.core.math.rational import (
    GCD_MAX_ITERATIONS,
    GcdNonConvergence,
    gcd,
    lcm,
)

INTEGRAL_PAIRS = [
    (12, 18),
    (18, 12),
    (-12, 18),
    (12, -18),
    (-12, -18),
    (7, 13),
    (100, 75),
    (1, 1),
    (270, 192),
    (1071, 462),
    (2**40, 2**20 * 3),
]


# =============================================================================
# ТЕСТЫ: gcd
# =============================================================================


class TestGcd:
    """Тесты gcd."""

    def test_reference_values(self):
        """Эталонные значения."""
        assert gcd(12, 18) == 6
        assert gcd(-12, 18) == 6
        assert gcd(1071, 462) == 21
        assert gcd(7, 13) == 1

    def test_returns_float(self):
        assert isinstance(gcd(12, 18), float)

    @pytest.mark.parametrize("a, b", INTEGRAL_PAIRS)
    def test_symmetric(self, a, b):
        """gcd(a, b) == gcd(b, a)."""
        assert gcd(a, b) == gcd(b, a)

    @pytest.mark.parametrize("a, b", INTEGRAL_PAIRS)
    def test_non_negative(self, a, b):
        """Результат всегда неотрицателен."""
        assert gcd(a, b) >= 0

    @pytest.mark.parametrize("a, b", INTEGRAL_PAIRS)
    def test_matches_integer_gcd(self, a, b):
        """Для целых совпадает с math.gcd."""
        assert gcd(a, b) == math.gcd(a, b)

    def test_zero_operands(self):
        """Ноль: gcd(a, 0) = |a|, gcd(0, 0) = 0."""
        assert gcd(0, 5) == 5
        assert gcd(7, 0) == 7
        assert gcd(-7, 0) == 7
        assert gcd(0, 0) == 0

    def test_real_operands(self):
        """Точно представимые дробные операнды."""
        assert gcd(1.5, 0.5) == 0.5
        assert gcd(0.75, 0.5) == 0.25
        assert gcd(2.5, 7.5) == 2.5

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad):
        """NaN/Inf → ValueError."""
        with pytest.raises(ValueError, match="must be a finite float"):
            gcd(bad, 1.0)
        with pytest.raises(ValueError, match="must be a finite float"):
            gcd(1.0, bad)

    def test_invalid_max_iterations(self):
        with pytest.raises(ValueError, match="max_iterations"):
            gcd(12, 18, max_iterations=0)

    def test_default_cap(self):
        assert GCD_MAX_ITERATIONS == 10_000


# =============================================================================
# ТЕСТЫ: предел итераций
# =============================================================================


class TestGcdNonConvergence:
    """Тесты предела итераций цикла Евклида."""

    def test_cap_exceeded_raises(self):
        """12, 18 требует 3 итерации: предел 2 → исключение."""
        with pytest.raises(GcdNonConvergence, match="exceeded 2 iterations") as exc_info:
            gcd(12, 18, max_iterations=2)
        assert exc_info.value.iterations == 2

    def test_cap_exactly_sufficient(self):
        """Ровно 3 итерации достаточно."""
        assert gcd(12, 18, max_iterations=3) == 6

    def test_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            gcd(1071, 462, max_iterations=1)

    def test_warning_logged(self, caplog):
        """Несходимость логируется на уровне WARNING."""
        caplog.set_level(logging.WARNING, logger="src.core.math.rational")
        with pytest.raises(GcdNonConvergence):
            gcd(12, 18, max_iterations=1)
        assert "did not converge" in caplog.text

    def test_lcm_propagates_cap(self):
        with pytest.raises(GcdNonConvergence):
            lcm(12, 18, max_iterations=1)


# =============================================================================
# ТЕСТЫ: lcm
# =============================================================================


class TestLcm:
    """Тесты lcm."""

    def test_reference_values(self):
        assert lcm(4, 6) == 12
        assert lcm(21, 6) == 42
        assert lcm(-4, 6) == 12

    @pytest.mark.parametrize("a, b", INTEGRAL_PAIRS)
    def test_product_identity(self, a, b):
        """lcm(a, b) × gcd(a, b) == |a × b|."""
        assert lcm(a, b) * gcd(a, b) == pytest.approx(abs(a * b))

    @pytest.mark.parametrize("a, b", INTEGRAL_PAIRS)
    def test_non_negative(self, a, b):
        assert lcm(a, b) >= 0

    def test_one_zero_operand(self):
        """lcm(a, 0) = 0 для ненулевого a."""
        assert lcm(0, 5) == 0
        assert lcm(5, 0) == 0

    def test_both_zero_is_nan(self):
        """lcm(0, 0) = NaN, исключение не поднимается."""
        assert math.isnan(lcm(0, 0))
        assert math.isnan(lcm(0.0, -0.0))

    def test_real_operands(self):
        assert lcm(1.5, 0.5) == 1.5
        assert lcm(0.75, 0.5) == 1.5

    def test_non_finite_rejected(self):
        with pytest.raises(ValueError):
            lcm(math.nan, 2.0)
