"""
Numeric primitives used by the discount rules and the orchestrator.
"""

from discount_engine.core.math.numerical_safeguards import (
    MONEY_FLOOR,
    clamp,
    is_valid_float,
    validate_in_range,
    validate_non_negative,
    validate_non_negative_int,
)

__all__ = [
    "MONEY_FLOOR",
    "clamp",
    "is_valid_float",
    "validate_in_range",
    "validate_non_negative",
    "validate_non_negative_int",
]
