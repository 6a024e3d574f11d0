"""
discount-engine — composition of discount rules into a final purchase price.

Four independent rules (tiered, loyalty, bulk, coupon) and one orchestrator
that applies them in a fixed pipeline. Everything here is a pure, synchronous
function of its inputs.
"""

from discount_engine.core.errors import ConfigurationError, InvalidInputError
from discount_engine.pricing.orchestrator import (
    PricingBreakdown,
    PricingConfig,
    PricingOrchestrator,
    compute_final_price,
    price_request,
)

__all__ = [
    "InvalidInputError",
    "ConfigurationError",
    "PricingBreakdown",
    "PricingConfig",
    "PricingOrchestrator",
    "compute_final_price",
    "price_request",
]
