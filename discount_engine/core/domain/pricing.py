"""
PricingRequest / PricingResult — ephemeral pricing contracts

Immutable Pydantic models carrying one pricing computation in and out of the
engine. Field names and constraints mirror the JSON Schemas in
discount_engine/core/contracts/schema/.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PricingRequest(BaseModel):
    """
    Inputs of one final-price computation.

    Constraints match what a caller has to guarantee before calling the
    orchestrator: non-negative base amount and item count.
    """

    base_amount: float = Field(..., ge=0, description="Base price before any discount")
    item_count: int = Field(0, ge=0, description="Number of purchased items")
    is_member: bool = Field(..., description="Customer is a loyalty club member")
    is_first_purchase: bool = Field(..., description="This is the customer's first purchase")
    coupon_code: Optional[str] = Field(None, description="Coupon code, exact match, nullable")

    model_config = {"frozen": True}


class PricingResult(BaseModel):
    """
    Output of one final-price computation.

    original_price echoes the request's base amount.
    """

    original_price: float = Field(..., ge=0, description="Base amount as requested")
    final_price: float = Field(..., ge=0, description="Price to pay after all discounts")

    model_config = {"frozen": True}
