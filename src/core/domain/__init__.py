"""
Domain models and value objects.

Contains the Magnitude value object and the SI prefix tables it is scaled by.
"""

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

__all__ = [
    # SI prefix tables
    "PREFIX_TABLE",
    "LEGACY_PREFIX_TABLE",
    "MIN_EXPONENT_STEP",
    "MAX_EXPONENT_STEP",
    "UNIT_SEPARATOR",
    "PrefixTableVariant",
    "EngineeringConfig",
    "UnsupportedMagnitude",
    "prefix_table",
    "symbol_for",
    "base_value",
    "render_number",
    # Magnitude model
    "Magnitude",
    "FormatKind",
    "FormatOutcome",
]
