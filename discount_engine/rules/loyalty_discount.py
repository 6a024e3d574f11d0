"""Loyalty Discount — discount rate from membership and first-purchase status

Two causes, one effect. The full truth table:

    is_member | is_first_purchase | rate
    ----------+-------------------+-----
    True      | True              | 0.15
    True      | False             | 0.10
    False     | True              | 0.05
    False     | False             | 0.00

Total over its domain: no error conditions.
"""

from dataclasses import dataclass
from typing import Optional

from discount_engine.core.domain.units import RATE_MAX, RATE_MIN
from discount_engine.core.errors import ConfigurationError
from discount_engine.core.math.numerical_safeguards import validate_in_range


@dataclass(frozen=True)
class LoyaltyDiscountConfig:
    """Rate for each cell of the membership × first-purchase table."""

    member_first_purchase_rate: float = 0.15
    member_returning_rate: float = 0.10
    guest_first_purchase_rate: float = 0.05
    guest_returning_rate: float = 0.0

    def __post_init__(self) -> None:
        for name in (
            "member_first_purchase_rate",
            "member_returning_rate",
            "guest_first_purchase_rate",
            "guest_returning_rate",
        ):
            try:
                validate_in_range(getattr(self, name), name, RATE_MIN, RATE_MAX)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e

    @property
    def max_rate(self) -> float:
        return max(
            self.member_first_purchase_rate,
            self.member_returning_rate,
            self.guest_first_purchase_rate,
            self.guest_returning_rate,
        )


class LoyaltyDiscountRate:
    """Discount rate from two boolean facts."""

    def __init__(self, config: Optional[LoyaltyDiscountConfig] = None):
        self.config = config or LoyaltyDiscountConfig()

    def rate(self, is_member: bool, is_first_purchase: bool) -> float:
        """Loyalty rate for the given membership and first-purchase flags."""
        if is_member and is_first_purchase:
            return self.config.member_first_purchase_rate

        if is_member and not is_first_purchase:
            return self.config.member_returning_rate

        if not is_member and is_first_purchase:
            return self.config.guest_first_purchase_rate

        return self.config.guest_returning_rate


_DEFAULT_RULE = LoyaltyDiscountRate()


def calculate_loyalty_discount_rate(is_member: bool, is_first_purchase: bool) -> float:
    """Loyalty rate with the default table."""
    return _DEFAULT_RULE.rate(is_member, is_first_purchase)
