"""
Numerical Safeguards — safe float primitives for money arithmetic

The pricing pipeline works on plain floats. This module keeps the few guards
it relies on in one place:
- NaN/Inf detection, so non-finite amounts never enter a rule
- Range clamping for the final non-negativity guarantee
- Input validators that raise InvalidInputError with the offending field

CRITICAL INVARIANTS:
1. NaN/Inf never reach a bracket comparison (rejected up front)
2. clamp() never widens a value, it only pulls it into [min, max]
3. Validators never coerce; they accept or raise
"""

import math
from typing import Any, Final

from discount_engine.core.errors import InvalidInputError

# =============================================================================
# CONSTANTS
# =============================================================================

# Lower bound of every monetary result
MONEY_FLOOR: Final[float] = 0.0


# =============================================================================
# FLOAT VALIDITY
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that value is a finite number.

    Returns:
        False for NaN, +Inf and -Inf, True otherwise
    """
    return not (math.isnan(value) or math.isinf(value))


# =============================================================================
# CLAMPING
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Restrict value to [min_value, max_value].

    A value equal to a bound comes back as the bound itself, so -0.0
    clamped at 0.0 yields 0.0.

    Args:
        value: Source value
        min_value: Lower bound (optional)
        max_value: Upper bound (optional)

    Returns:
        Clamped value

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0)
        0.0
        >>> clamp(15.0, max_value=10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(min_value, result)

    if max_value is not None:
        result = min(max_value, result)

    return result


# =============================================================================
# VALIDATION
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Check that a monetary value is finite and >= 0.

    Args:
        value: Value to check
        name: Parameter name for the error message

    Raises:
        InvalidInputError: if value < 0 or NaN/Inf
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(name, value, f"{name} must be a number")

    if not is_valid_float(value):
        raise InvalidInputError(name, value, f"{name} must be a finite number (not NaN/Inf)")

    if value < 0:
        raise InvalidInputError(name, value, f"{name} cannot be negative")


def validate_non_negative_int(value: Any, name: str) -> None:
    """
    Check that a count is an int (bool excluded) and >= 0.

    Raises:
        InvalidInputError: if value is not an int or is negative
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(name, value, f"{name} must be an integer")

    if value < 0:
        raise InvalidInputError(name, value, f"{name} cannot be negative")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Check that value lies in [min_value, max_value].

    Args:
        value: Value to check
        name: Parameter name for the error message
        min_value: Lower bound (optional)
        max_value: Upper bound (optional)

    Raises:
        ValueError: if value is out of range or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
