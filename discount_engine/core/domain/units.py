"""
Units — Money and Rate conversions

The only sanctioned way to turn a Rate into Money inside the engine:
- Money: currency-denominated float, never negative as a rule output
- Rate: dimensionless fraction in [0, 1] (0.15 = 15%)

Rules and the orchestrator never multiply amounts by rates inline.
"""

from typing import Final

# =============================================================================
# BOUNDS
# =============================================================================

RATE_MIN: Final[float] = 0.0
RATE_MAX: Final[float] = 1.0

ZERO_MONEY: Final[float] = 0.0


# =============================================================================
# CONVERTERS
# =============================================================================


def rate_of(amount: float, rate: float) -> float:
    """
    Money share of an amount.

    discount = amount * rate

    Args:
        amount: Money
        rate: Rate (fraction)

    Returns:
        The discount in Money
    """
    return amount * rate


def apply_rate(amount: float, rate: float) -> float:
    """
    Amount remaining after a percentage discount.

    remaining = amount * (1 - rate)

    No cap is applied to rate here: a rate above 1.0 yields a negative amount.
    """
    return amount * (1 - rate)


def combine_rates(*rates: float) -> float:
    """Sum percentage rates (stacking, not compounding)."""
    return sum(rates, RATE_MIN)
