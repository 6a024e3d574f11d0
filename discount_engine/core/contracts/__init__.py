"""
Contract Validation Module

JSON Schema validation of the payloads crossing the engine boundary.
"""

from .validators import (
    ContractValidator,
    PricingRequestValidator,
    PricingResultValidator,
    SchemaLoader,
    validate_pricing_request,
    validate_pricing_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PricingRequestValidator",
    "PricingResultValidator",
    # Functions
    "validate_pricing_request",
    "validate_pricing_result",
]
