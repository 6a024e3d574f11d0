"""Bulk Tier State Machine — finite-state view of the bulk discount brackets

States (item count thresholds 1, 5, 10):
- NONE:  item_count == 0       → 0%
- TIER1: 1 <= item_count < 5   → 5%
- TIER2: 5 <= item_count < 10  → 10%
- TIER3: item_count >= 10      → 15%

Transitions are triggered only by item_count crossing a threshold, in either
direction, and may skip tiers (NONE → TIER3 on a jump from 0 to 12). There is
no hysteresis and no transition history: the target tier is a function of
item_count alone.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from discount_engine.core.math.numerical_safeguards import validate_non_negative_int
from discount_engine.rules.bulk_discount import BulkDiscountConfig


class BulkTier(str, Enum):
    """Bulk discount tier."""

    NONE = "NONE"
    TIER1 = "TIER1"
    TIER2 = "TIER2"
    TIER3 = "TIER3"


_TIER_ORDER = (BulkTier.NONE, BulkTier.TIER1, BulkTier.TIER2, BulkTier.TIER3)


@dataclass(frozen=True)
class BulkTierTransitionResult:
    """Result of evaluating a bulk tier transition."""

    new_tier: BulkTier
    previous_tier: BulkTier
    item_count: int
    rate: float

    # Diagnostics
    transition_occurred: bool
    transition_reason: str

    details: str


class BulkTierStateMachine:
    """Bulk tier transitions driven by item count.

    Uses the same thresholds and rates as BulkDiscountRate for a given
    BulkDiscountConfig, so rate_for(tier_for(n)) == BulkDiscountRate.rate(n).
    """

    def __init__(self, config: Optional[BulkDiscountConfig] = None):
        self.config = config or BulkDiscountConfig()

    def tier_for(self, item_count: int) -> BulkTier:
        """Tier reached by item_count.

        Raises:
            InvalidInputError: if item_count is negative or not an int
        """
        validate_non_negative_int(item_count, "item_count")

        if item_count >= self.config.tier3_threshold:
            return BulkTier.TIER3
        elif item_count >= self.config.tier2_threshold:
            return BulkTier.TIER2
        elif item_count >= self.config.tier1_threshold:
            return BulkTier.TIER1
        else:
            return BulkTier.NONE

    def rate_for(self, tier: BulkTier) -> float:
        """Discount rate attached to tier."""
        if tier == BulkTier.TIER3:
            return self.config.tier3_rate
        elif tier == BulkTier.TIER2:
            return self.config.tier2_rate
        elif tier == BulkTier.TIER1:
            return self.config.tier1_rate
        else:
            return self.config.none_rate

    def evaluate_transition(
        self,
        current_tier: BulkTier,
        item_count: int,
    ) -> BulkTierTransitionResult:
        """Move from current_tier to the tier item_count falls into.

        Args:
            current_tier: tier before the item count changed
            item_count: new item count

        Returns:
            BulkTierTransitionResult with the new tier and its rate

        Raises:
            InvalidInputError: if item_count is negative or not an int
        """
        new_tier = self.tier_for(item_count)
        rate = self.rate_for(new_tier)

        if new_tier == current_tier:
            return BulkTierTransitionResult(
                new_tier=new_tier,
                previous_tier=current_tier,
                item_count=item_count,
                rate=rate,
                transition_occurred=False,
                transition_reason="no_transition",
                details=f"Tier={new_tier.value}, item_count={item_count}, rate={rate:.2f}",
            )

        direction = "up" if _TIER_ORDER.index(new_tier) > _TIER_ORDER.index(current_tier) else "down"

        return BulkTierTransitionResult(
            new_tier=new_tier,
            previous_tier=current_tier,
            item_count=item_count,
            rate=rate,
            transition_occurred=True,
            transition_reason=f"item_count_{direction}_{current_tier.value}_to_{new_tier.value}",
            details=(
                f"item_count={item_count} crossed threshold: "
                f"{current_tier.value} → {new_tier.value}, rate={rate:.2f}"
            ),
        )
