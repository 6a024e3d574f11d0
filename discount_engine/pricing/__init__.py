"""Pricing — the orchestrator composing all discount rules."""

from .orchestrator import (
    PricingBreakdown,
    PricingConfig,
    PricingOrchestrator,
    compute_final_price,
    price_request,
)

__all__ = [
    "PricingBreakdown",
    "PricingConfig",
    "PricingOrchestrator",
    "compute_final_price",
    "price_request",
]
