"""
Domain models and value objects.

Money/Rate units and the pricing request/result models.
"""

from discount_engine.core.domain.pricing import PricingRequest, PricingResult
from discount_engine.core.domain.units import (
    RATE_MAX,
    RATE_MIN,
    ZERO_MONEY,
    apply_rate,
    combine_rates,
    rate_of,
)

__all__ = [
    # Units module
    "RATE_MIN",
    "RATE_MAX",
    "ZERO_MONEY",
    "rate_of",
    "apply_rate",
    "combine_rates",
    # Pricing models
    "PricingRequest",
    "PricingResult",
]
