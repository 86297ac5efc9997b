"""
Core math modules

Небольшие чистые численные функции без состояния: инженерная нотация,
НОД/НОК для вещественных чисел, медиана.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    validate_finite,
    validate_no_nan,
)

# Engineering Scale
from src.core.math.engineering import (
    classify,
    exponent_step,
    format_engineering,
    try_format,
)

# Rational Arithmetic
from src.core.math.rational import (
    GCD_MAX_ITERATIONS,
    GcdNonConvergence,
    gcd,
    lcm,
)

# Order Statistics
from src.core.math.order_statistics import (
    EmptyInput,
    is_odd,
    median,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Checks
    "is_close",
    "is_valid_float",
    "validate_finite",
    "validate_no_nan",
    # Engineering Scale — Functions
    "classify",
    "exponent_step",
    "format_engineering",
    "try_format",
    # Rational Arithmetic — Constants
    "GCD_MAX_ITERATIONS",
    # Rational Arithmetic — Exceptions
    "GcdNonConvergence",
    # Rational Arithmetic — Functions
    "gcd",
    "lcm",
    # Order Statistics — Exceptions
    "EmptyInput",
    # Order Statistics — Functions
    "is_odd",
    "median",
]
