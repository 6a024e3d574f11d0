"""Tiered Discount — discount amount by value bracket

Brackets (inclusive lower bounds, evaluated highest-first):
- amount >= 500        → 10% of amount
- 100 <= amount < 500  → 5% of amount
- amount < 100         → 0

A boundary value belongs to the higher bracket: 500.00 gets 10%, 499.99 gets 5%.

Negative or non-finite amounts are a contract violation and raise
InvalidInputError; they are never clamped.
"""

from dataclasses import dataclass
from typing import Optional

from discount_engine.core.domain.units import RATE_MAX, RATE_MIN, ZERO_MONEY, rate_of
from discount_engine.core.errors import ConfigurationError
from discount_engine.core.math.numerical_safeguards import validate_in_range, validate_non_negative


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TieredDiscountConfig:
    """Thresholds and rates of the value brackets."""

    upper_threshold: float = 500.0
    upper_rate: float = 0.10

    lower_threshold: float = 100.0
    lower_rate: float = 0.05

    def __post_init__(self) -> None:
        if not 0 <= self.lower_threshold < self.upper_threshold:
            raise ConfigurationError(
                f"Tiered thresholds must satisfy 0 <= lower < upper, "
                f"got lower={self.lower_threshold}, upper={self.upper_threshold}"
            )
        for name in ("upper_rate", "lower_rate"):
            try:
                validate_in_range(getattr(self, name), name, RATE_MIN, RATE_MAX)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e


# =============================================================================
# RULE
# =============================================================================


class TieredDiscountRule:
    """Discount amount from a monetary value, by value bracket."""

    def __init__(self, config: Optional[TieredDiscountConfig] = None):
        self.config = config or TieredDiscountConfig()

    def discount(self, amount: float) -> float:
        """Discount for amount.

        Args:
            amount: Money, must be >= 0

        Returns:
            The discount in Money (not the discounted amount)

        Raises:
            InvalidInputError: if amount < 0 or NaN/Inf
        """
        validate_non_negative(amount, "amount")

        if amount >= self.config.upper_threshold:
            return rate_of(amount, self.config.upper_rate)

        if amount >= self.config.lower_threshold:
            return rate_of(amount, self.config.lower_rate)

        return ZERO_MONEY


_DEFAULT_RULE = TieredDiscountRule()


def calculate_tiered_discount(amount: float) -> float:
    """Tiered discount with the default brackets."""
    return _DEFAULT_RULE.discount(amount)
