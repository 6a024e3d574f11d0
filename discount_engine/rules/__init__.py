"""Rules — the four independent discount rules.

- Tiered: discount amount by value bracket
- Loyalty: discount rate by membership × first purchase
- Bulk: discount rate by item count bracket
- Coupon: fixed discount amount by exact code

Every rule is a stateless class with an optional frozen config, plus a
module-level function bound to the default config.
"""

from .bulk_discount import BulkDiscountConfig, BulkDiscountRate, calculate_bulk_discount_rate
from .coupon import DEFAULT_COUPONS, CouponConfig, CouponRule, apply_fixed_coupon
from .loyalty_discount import (
    LoyaltyDiscountConfig,
    LoyaltyDiscountRate,
    calculate_loyalty_discount_rate,
)
from .tiered_discount import TieredDiscountConfig, TieredDiscountRule, calculate_tiered_discount

__all__ = [
    "TieredDiscountRule",
    "TieredDiscountConfig",
    "calculate_tiered_discount",
    "LoyaltyDiscountRate",
    "LoyaltyDiscountConfig",
    "calculate_loyalty_discount_rate",
    "BulkDiscountRate",
    "BulkDiscountConfig",
    "calculate_bulk_discount_rate",
    "CouponRule",
    "CouponConfig",
    "DEFAULT_COUPONS",
    "apply_fixed_coupon",
]
