"""Bulk Discount — discount rate from item count

Brackets (inclusive lower bounds, evaluated highest-first):
- item_count >= 10      → 0.15
- 5 <= item_count < 10  → 0.10
- 1 <= item_count < 5   → 0.05
- item_count == 0       → 0.00

Negative or non-integer counts raise InvalidInputError, the same policy the
tiered rule applies to negative amounts.

The finite-state view of these brackets lives in
discount_engine.tiers.state_machine.
"""

from dataclasses import dataclass
from typing import Optional

from discount_engine.core.domain.units import RATE_MAX, RATE_MIN
from discount_engine.core.errors import ConfigurationError
from discount_engine.core.math.numerical_safeguards import (
    validate_in_range,
    validate_non_negative_int,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BulkDiscountConfig:
    """Item-count thresholds and the rate of each bracket."""

    tier1_threshold: int = 1
    tier1_rate: float = 0.05

    tier2_threshold: int = 5
    tier2_rate: float = 0.10

    tier3_threshold: int = 10
    tier3_rate: float = 0.15

    none_rate: float = 0.0

    def __post_init__(self) -> None:
        if not 0 < self.tier1_threshold < self.tier2_threshold < self.tier3_threshold:
            raise ConfigurationError(
                "Bulk thresholds must satisfy 0 < tier1 < tier2 < tier3, got "
                f"{self.tier1_threshold}, {self.tier2_threshold}, {self.tier3_threshold}"
            )
        for name in ("none_rate", "tier1_rate", "tier2_rate", "tier3_rate"):
            try:
                validate_in_range(getattr(self, name), name, RATE_MIN, RATE_MAX)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e

    @property
    def max_rate(self) -> float:
        return max(self.none_rate, self.tier1_rate, self.tier2_rate, self.tier3_rate)


# =============================================================================
# RULE
# =============================================================================


class BulkDiscountRate:
    """Discount rate from an item count, by count bracket."""

    def __init__(self, config: Optional[BulkDiscountConfig] = None):
        self.config = config or BulkDiscountConfig()

    def rate(self, item_count: int) -> float:
        """Bulk rate for item_count.

        Raises:
            InvalidInputError: if item_count is negative or not an int
        """
        validate_non_negative_int(item_count, "item_count")

        if item_count >= self.config.tier3_threshold:
            return self.config.tier3_rate

        if item_count >= self.config.tier2_threshold:
            return self.config.tier2_rate

        if item_count >= self.config.tier1_threshold:
            return self.config.tier1_rate

        return self.config.none_rate


_DEFAULT_RULE = BulkDiscountRate()


def calculate_bulk_discount_rate(item_count: int) -> float:
    """Bulk rate with the default brackets."""
    return _DEFAULT_RULE.rate(item_count)
