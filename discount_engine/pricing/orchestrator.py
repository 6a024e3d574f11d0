"""Pricing Orchestrator — final price from the four discount rules

Fixed pipeline (order is part of the contract):
1. loyalty_rate = Loyalty(is_member, is_first_purchase)
2. bulk_rate = Bulk(item_count)
3. combined_rate = loyalty_rate + bulk_rate        (no cap here)
4. after_percentage = base_amount * (1 - combined_rate)
5. tiered_discount = Tiered(after_percentage)      (post-percentage amount, not base)
6. after_tiered = after_percentage - tiered_discount
7. coupon_discount = Coupon(coupon_code)
8. raw_final = after_tiered - coupon_discount
9. final_price = max(0, raw_final)

The final clamp is the only place a negative result is absorbed. Rule errors
(InvalidInputError) propagate unchanged: a negative base amount surfaces from
step 5.

PricingConfig rejects rate tables whose maximum combined rate exceeds 1.0, so
step 4 can never turn a non-negative base amount negative.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from discount_engine.core.contracts.validators import validate_pricing_request, validate_pricing_result
from discount_engine.core.domain.pricing import PricingRequest, PricingResult
from discount_engine.core.domain.units import RATE_MAX, apply_rate, combine_rates
from discount_engine.core.errors import ConfigurationError
from discount_engine.core.math.numerical_safeguards import MONEY_FLOOR, clamp
from discount_engine.rules.bulk_discount import BulkDiscountConfig, BulkDiscountRate
from discount_engine.rules.coupon import CouponConfig, CouponRule
from discount_engine.rules.loyalty_discount import LoyaltyDiscountConfig, LoyaltyDiscountRate
from discount_engine.rules.tiered_discount import TieredDiscountConfig, TieredDiscountRule
from discount_engine.tiers.state_machine import BulkTier, BulkTierStateMachine

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PricingConfig:
    """Configuration of every rule in the pipeline."""

    tiered: TieredDiscountConfig = field(default_factory=TieredDiscountConfig)
    loyalty: LoyaltyDiscountConfig = field(default_factory=LoyaltyDiscountConfig)
    bulk: BulkDiscountConfig = field(default_factory=BulkDiscountConfig)
    coupon: CouponConfig = field(default_factory=CouponConfig)

    def __post_init__(self) -> None:
        max_combined = self.loyalty.max_rate + self.bulk.max_rate
        if max_combined > RATE_MAX:
            raise ConfigurationError(
                f"Maximum combined loyalty + bulk rate is {max_combined:.4f}, "
                f"must not exceed {RATE_MAX}"
            )


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class PricingBreakdown:
    """Every intermediate value of one pipeline run."""

    base_amount: float
    item_count: int
    is_member: bool
    is_first_purchase: bool
    coupon_code: Optional[str]

    # Percentage stage
    loyalty_rate: float
    bulk_rate: float
    bulk_tier: BulkTier
    combined_rate: float
    amount_after_percentage: float

    # Tiered stage
    tiered_discount: float
    amount_after_tiered: float

    # Coupon stage
    coupon_discount: float
    raw_final_price: float

    final_price: float
    clamped: bool

    details: str


# =============================================================================
# ORCHESTRATOR
# =============================================================================


class PricingOrchestrator:
    """Applies the loyalty, bulk, tiered and coupon rules in a fixed order.

    Stateless: one instance can serve any number of concurrent callers.
    """

    def __init__(self, config: Optional[PricingConfig] = None):
        self.config = config or PricingConfig()

        self.tiered_rule = TieredDiscountRule(self.config.tiered)
        self.loyalty_rule = LoyaltyDiscountRate(self.config.loyalty)
        self.bulk_rule = BulkDiscountRate(self.config.bulk)
        self.coupon_rule = CouponRule(self.config.coupon)
        self.bulk_tiers = BulkTierStateMachine(self.config.bulk)

    def evaluate(
        self,
        base_amount: float,
        item_count: int,
        is_member: bool,
        is_first_purchase: bool,
        coupon_code: Optional[str] = None,
    ) -> PricingBreakdown:
        """Run the pipeline and return every intermediate value.

        Args:
            base_amount: price before any discount
            item_count: number of purchased items
            is_member: customer is a loyalty member
            is_first_purchase: this is the customer's first purchase
            coupon_code: coupon code, exact match, may be None

        Returns:
            PricingBreakdown; final_price is always >= 0

        Raises:
            InvalidInputError: negative item_count, or negative/non-finite
                amount reaching the tiered rule
        """
        # 1-3. Percentage discounts stack
        loyalty_rate = self.loyalty_rule.rate(is_member, is_first_purchase)
        bulk_rate = self.bulk_rule.rate(item_count)
        combined_rate = combine_rates(loyalty_rate, bulk_rate)

        # 4
        amount_after_percentage = apply_rate(base_amount, combined_rate)

        # 5-6. Tiered bracket is chosen on the discounted amount
        tiered_discount = self.tiered_rule.discount(amount_after_percentage)
        amount_after_tiered = amount_after_percentage - tiered_discount

        # 7-8
        coupon_discount = self.coupon_rule.discount(coupon_code)
        raw_final_price = amount_after_tiered - coupon_discount

        # 9
        final_price = clamp(raw_final_price, min_value=MONEY_FLOOR)
        clamped = final_price != raw_final_price

        breakdown = PricingBreakdown(
            base_amount=base_amount,
            item_count=item_count,
            is_member=is_member,
            is_first_purchase=is_first_purchase,
            coupon_code=coupon_code,
            loyalty_rate=loyalty_rate,
            bulk_rate=bulk_rate,
            bulk_tier=self.bulk_tiers.tier_for(item_count),
            combined_rate=combined_rate,
            amount_after_percentage=amount_after_percentage,
            tiered_discount=tiered_discount,
            amount_after_tiered=amount_after_tiered,
            coupon_discount=coupon_discount,
            raw_final_price=raw_final_price,
            final_price=final_price,
            clamped=clamped,
            details=(
                f"base={base_amount:.2f}, rate={combined_rate:.2f} "
                f"(loyalty={loyalty_rate:.2f}, bulk={bulk_rate:.2f}) → {amount_after_percentage:.2f}, "
                f"tiered=-{tiered_discount:.2f} → {amount_after_tiered:.2f}, "
                f"coupon=-{coupon_discount:.2f} → {raw_final_price:.2f}"
                + (" (clamped to 0)" if clamped else "")
            ),
        )

        logger.debug("Pricing pipeline: %s", breakdown.details)
        return breakdown

    def final_price(
        self,
        base_amount: float,
        item_count: int,
        is_member: bool,
        is_first_purchase: bool,
        coupon_code: Optional[str] = None,
    ) -> float:
        """Final price to pay, never negative."""
        return self.evaluate(
            base_amount, item_count, is_member, is_first_purchase, coupon_code
        ).final_price


_DEFAULT_ORCHESTRATOR = PricingOrchestrator()


# =============================================================================
# EXTERNAL INTERFACE
# =============================================================================


def compute_final_price(
    base_amount: float,
    item_count: int,
    is_member: bool,
    is_first_purchase: bool,
    coupon_code: Optional[str] = None,
) -> float:
    """Final price with the default rule configuration.

    Callers are responsible for request-shape validation; see price_request
    for a validating entry point.
    """
    return _DEFAULT_ORCHESTRATOR.final_price(
        base_amount, item_count, is_member, is_first_purchase, coupon_code
    )


def price_request(
    payload: Dict[str, Any],
    orchestrator: Optional[PricingOrchestrator] = None,
) -> PricingResult:
    """Validate a raw request payload and price it.

    Args:
        payload: dict matching pricing_request.json
        orchestrator: orchestrator to use (default configuration if None)

    Returns:
        PricingResult with original_price and final_price

    Raises:
        jsonschema.ValidationError: if payload does not match the schema
    """
    validate_pricing_request(payload)
    request = PricingRequest.model_validate(payload)

    breakdown = (orchestrator or _DEFAULT_ORCHESTRATOR).evaluate(
        base_amount=request.base_amount,
        item_count=request.item_count,
        is_member=request.is_member,
        is_first_purchase=request.is_first_purchase,
        coupon_code=request.coupon_code,
    )

    result = PricingResult(
        original_price=clamp(request.base_amount, min_value=MONEY_FLOOR),
        final_price=breakdown.final_price,
    )
    validate_pricing_result(result.model_dump())

    logger.debug(
        "Priced request: original=%.2f final=%.2f", result.original_price, result.final_price
    )
    return result
