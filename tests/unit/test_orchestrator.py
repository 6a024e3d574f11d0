"""Tests for the pricing orchestrator.

Coverage:
- End-to-end scenarios
- Pipeline ordering (tiered bracket on the post-percentage amount)
- Final non-negativity clamp
- Error propagation
- Configuration guard on the combined rate
- Request boundary (price_request)
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor

import pytest
from jsonschema import ValidationError

from discount_engine import compute_final_price, price_request
from discount_engine.core.domain.pricing import PricingResult
from discount_engine.core.errors import ConfigurationError, InvalidInputError
from discount_engine.pricing.orchestrator import PricingConfig, PricingOrchestrator
from discount_engine.rules.bulk_discount import BulkDiscountConfig
from discount_engine.rules.coupon import CouponConfig
from discount_engine.rules.loyalty_discount import LoyaltyDiscountConfig
from discount_engine.tiers.state_machine import BulkTier


@pytest.fixture
def orchestrator():
    return PricingOrchestrator()


# =============================================================================
# END-TO-END SCENARIOS
# =============================================================================


class TestScenarios:
    def test_member_buying_twelve_items_with_promo50(self, orchestrator) -> None:
        """800, 12 items, returning member, PROMO50 → 490."""
        breakdown = orchestrator.evaluate(800.0, 12, True, False, "PROMO50")

        assert breakdown.loyalty_rate == 0.10
        assert breakdown.bulk_rate == 0.15
        assert breakdown.bulk_tier == BulkTier.TIER3
        assert breakdown.combined_rate == pytest.approx(0.25)
        assert breakdown.amount_after_percentage == pytest.approx(600.0)
        assert breakdown.tiered_discount == pytest.approx(60.0)
        assert breakdown.amount_after_tiered == pytest.approx(540.0)
        assert breakdown.coupon_discount == 50.0
        assert breakdown.final_price == pytest.approx(490.0)
        assert breakdown.clamped is False

    def test_first_time_member_buying_four_items_with_promo10(self, orchestrator) -> None:
        """200, 4 items, first-time member, PROMO10 → 142."""
        breakdown = orchestrator.evaluate(200.0, 4, True, True, "PROMO10")

        assert breakdown.loyalty_rate == 0.15
        assert breakdown.bulk_rate == 0.05
        assert breakdown.combined_rate == pytest.approx(0.20)
        assert breakdown.amount_after_percentage == pytest.approx(160.0)
        assert breakdown.tiered_discount == pytest.approx(8.0)
        assert breakdown.amount_after_tiered == pytest.approx(152.0)
        assert breakdown.final_price == pytest.approx(142.0)

    def test_final_price_matches_breakdown(self, orchestrator) -> None:
        assert orchestrator.final_price(800.0, 12, True, False, "PROMO50") == pytest.approx(490.0)

    def test_compute_final_price(self) -> None:
        assert compute_final_price(800.0, 12, True, False, "PROMO50") == pytest.approx(490.0)
        assert compute_final_price(200.0, 4, True, True, "PROMO10") == pytest.approx(142.0)

    def test_no_discounts_at_all(self, orchestrator) -> None:
        assert orchestrator.final_price(50.0, 0, False, False, None) == 50.0

    def test_zero_base_amount(self, orchestrator) -> None:
        assert orchestrator.final_price(0.0, 3, True, True, None) == 0.0

    def test_malformed_coupon_ignored_in_pipeline(self, orchestrator) -> None:
        assert orchestrator.final_price(800.0, 12, True, False, " PROMO50 ") == pytest.approx(540.0)

    def test_coupon_defaults_to_none(self, orchestrator) -> None:
        assert orchestrator.final_price(800.0, 12, True, False) == pytest.approx(540.0)


# =============================================================================
# ORDERING
# =============================================================================


class TestPipelineOrdering:
    def test_tiered_bracket_uses_post_percentage_amount(self, orchestrator) -> None:
        """600 base drops to 450 after 25% off, so the 5% bracket applies, not 10%."""
        breakdown = orchestrator.evaluate(600.0, 10, True, False, None)

        assert breakdown.amount_after_percentage == pytest.approx(450.0)
        assert breakdown.tiered_discount == pytest.approx(22.5)
        assert breakdown.final_price == pytest.approx(427.5)

    def test_percentage_drop_below_100_removes_tiered_discount(self, orchestrator) -> None:
        """110 base, 15% loyalty + 5% bulk → 88, below the first bracket."""
        breakdown = orchestrator.evaluate(110.0, 1, True, True, None)

        assert breakdown.amount_after_percentage == pytest.approx(88.0)
        assert breakdown.tiered_discount == 0.0
        assert breakdown.final_price == pytest.approx(88.0)

    def test_coupon_applied_after_tiered(self, orchestrator) -> None:
        """Coupon does not move the amount into a different tier bracket."""
        breakdown = orchestrator.evaluate(520.0, 0, False, False, "PROMO50")

        assert breakdown.tiered_discount == pytest.approx(52.0)
        assert breakdown.final_price == pytest.approx(418.0)


# =============================================================================
# CLAMP
# =============================================================================


class TestFinalClamp:
    def test_large_coupon_on_tiny_amount_clamps_to_zero(self, orchestrator) -> None:
        breakdown = orchestrator.evaluate(20.0, 0, False, False, "PROMO50")

        assert breakdown.raw_final_price == pytest.approx(-30.0)
        assert breakdown.final_price == 0.0
        assert breakdown.clamped is True
        assert "clamped to 0" in breakdown.details

    def test_exactly_zero_is_not_clamped(self, orchestrator) -> None:
        breakdown = orchestrator.evaluate(10.0, 0, False, False, "PROMO10")

        assert breakdown.final_price == 0.0
        assert breakdown.clamped is False

    def test_never_negative_over_input_grid(self, orchestrator) -> None:
        for base in (0.0, 0.01, 5.0, 60.0, 99.99, 100.0, 250.0, 499.99, 500.0, 2000.0):
            for count in (0, 1, 4, 5, 9, 10, 100):
                for is_member in (True, False):
                    for is_first in (True, False):
                        for code in (None, "PROMO10", "PROMO50", "bogus"):
                            price = orchestrator.final_price(base, count, is_member, is_first, code)
                            assert price >= 0.0

    def test_clamp_is_idempotent(self, orchestrator) -> None:
        price = orchestrator.final_price(20.0, 0, False, False, "PROMO50")
        assert max(0.0, price) == price

    def test_negative_zero_base_yields_positive_zero(self, orchestrator) -> None:
        """-0.0 is a valid base amount; the final price must not carry its sign."""
        price = orchestrator.final_price(-0.0, 0, False, False, None)

        assert price == 0.0
        assert math.copysign(1.0, price) == 1.0

    def test_negative_zero_base_through_request_boundary(self) -> None:
        result = price_request({"base_amount": -0.0, "is_member": False, "is_first_purchase": False})

        assert math.copysign(1.0, result.final_price) == 1.0
        assert "-0.0" not in result.model_dump_json()


# =============================================================================
# ERRORS
# =============================================================================


class TestErrorPropagation:
    def test_negative_base_amount_propagates(self, orchestrator) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            orchestrator.final_price(-100.0, 0, False, False, None)

        assert exc_info.value.field == "amount"

    def test_negative_item_count_propagates(self, orchestrator) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            orchestrator.final_price(100.0, -1, False, False, None)

        assert exc_info.value.field == "item_count"

    def test_nan_base_amount_propagates(self, orchestrator) -> None:
        with pytest.raises(InvalidInputError):
            orchestrator.final_price(float("nan"), 1, False, False, None)


# =============================================================================
# CONFIG
# =============================================================================


class TestPricingConfig:
    def test_default_max_combined_rate_is_safe(self) -> None:
        config = PricingConfig()
        assert config.loyalty.max_rate + config.bulk.max_rate == pytest.approx(0.30)

    def test_combined_rate_above_one_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="combined"):
            PricingConfig(
                loyalty=LoyaltyDiscountConfig(member_first_purchase_rate=0.6),
                bulk=BulkDiscountConfig(tier3_rate=0.5),
            )

    def test_combined_rate_of_exactly_one_allowed(self) -> None:
        config = PricingConfig(
            loyalty=LoyaltyDiscountConfig(member_first_purchase_rate=0.5),
            bulk=BulkDiscountConfig(tier3_rate=0.5),
        )
        orchestrator = PricingOrchestrator(config)

        assert orchestrator.final_price(1000.0, 10, True, True, None) == 0.0

    def test_config_is_hashable(self) -> None:
        assert hash(PricingConfig()) == hash(PricingConfig())
        assert len({PricingConfig(), PricingConfig()}) == 1

    def test_custom_coupons_flow_through(self) -> None:
        orchestrator = PricingOrchestrator(PricingConfig(coupon=CouponConfig(coupons={"VIP": 5.0})))

        assert orchestrator.final_price(50.0, 0, False, False, "VIP") == 45.0
        assert orchestrator.final_price(50.0, 0, False, False, "PROMO50") == 50.0


# =============================================================================
# REQUEST BOUNDARY
# =============================================================================


class TestPriceRequest:
    def test_valid_payload(self) -> None:
        result = price_request(
            {
                "base_amount": 800.0,
                "item_count": 12,
                "is_member": True,
                "is_first_purchase": False,
                "coupon_code": "PROMO50",
            }
        )

        assert isinstance(result, PricingResult)
        assert result.original_price == 800.0
        assert result.final_price == pytest.approx(490.0)

    def test_item_count_defaults_to_zero(self) -> None:
        result = price_request({"base_amount": 200, "is_member": False, "is_first_purchase": False})

        assert result.final_price == pytest.approx(190.0)

    def test_null_coupon(self) -> None:
        result = price_request(
            {"base_amount": 50.0, "is_member": False, "is_first_purchase": False, "coupon_code": None}
        )

        assert result.final_price == 50.0

    def test_custom_orchestrator(self) -> None:
        orchestrator = PricingOrchestrator(PricingConfig(coupon=CouponConfig(coupons={"VIP": 5.0})))
        result = price_request(
            {"base_amount": 50.0, "is_member": False, "is_first_purchase": False, "coupon_code": "VIP"},
            orchestrator=orchestrator,
        )

        assert result.final_price == 45.0

    @pytest.mark.parametrize(
        "payload",
        [
            {"is_member": True, "is_first_purchase": False},
            {"base_amount": -1.0, "is_member": True, "is_first_purchase": False},
            {"base_amount": "100", "is_member": True, "is_first_purchase": False},
            {"base_amount": 100.0, "is_member": "yes", "is_first_purchase": False},
            {"base_amount": 100.0, "is_member": True},
            {"base_amount": 100.0, "item_count": -2, "is_member": True, "is_first_purchase": False},
            {"base_amount": 100.0, "item_count": 2.5, "is_member": True, "is_first_purchase": False},
            {"base_amount": 100.0, "is_member": True, "is_first_purchase": False, "coupon_code": 10},
            {"base_amount": 100.0, "is_member": True, "is_first_purchase": False, "discount": 0.5},
        ],
    )
    def test_invalid_payload_rejected(self, payload) -> None:
        with pytest.raises(ValidationError):
            price_request(payload)


# =============================================================================
# AMBIENT
# =============================================================================


def test_pipeline_logged_at_debug(orchestrator, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="discount_engine.pricing.orchestrator"):
        orchestrator.evaluate(800.0, 12, True, False, "PROMO50")

    assert "Pricing pipeline" in caplog.text


def test_shared_orchestrator_is_thread_safe(orchestrator) -> None:
    args = [(800.0, 12, True, False, "PROMO50"), (200.0, 4, True, True, "PROMO10")] * 50

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda a: orchestrator.final_price(*a), args))

    assert results[0::2] == [pytest.approx(490.0)] * 50
    assert results[1::2] == [pytest.approx(142.0)] * 50
