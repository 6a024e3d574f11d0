"""Coupon — fixed discount amount from an exact-match code

Recognized codes:
- "PROMO10" → 10.0
- "PROMO50" → 50.0

Matching is exact. No trimming, no case folding: " PROMO10 " and "promo10"
are unknown codes. None, unknown codes and non-string values all yield 0.0;
this rule never raises.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from discount_engine.core.domain.units import ZERO_MONEY
from discount_engine.core.errors import ConfigurationError
from discount_engine.core.math.numerical_safeguards import is_valid_float


DEFAULT_COUPONS: Mapping[str, float] = MappingProxyType({
    "PROMO10": 10.0,
    "PROMO50": 50.0,
})


@dataclass(frozen=True)
class CouponConfig:
    """Recognized coupon codes and their fixed amounts."""

    coupons: Mapping[str, float] = field(default_factory=lambda: DEFAULT_COUPONS)

    def __post_init__(self) -> None:
        for code, amount in self.coupons.items():
            if not isinstance(code, str) or not code:
                raise ConfigurationError(f"Coupon code must be a non-empty string, got {code!r}")
            if isinstance(amount, bool) or not isinstance(amount, (int, float)):
                raise ConfigurationError(f"Coupon {code!r} amount must be a number, got {amount!r}")
            if not is_valid_float(amount) or amount < 0:
                raise ConfigurationError(f"Coupon {code!r} amount must be finite and >= 0, got {amount}")
        # Private read-only copy
        object.__setattr__(self, "coupons", MappingProxyType(dict(self.coupons)))

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.coupons.items())))


class CouponRule:
    """Fixed discount amount from a coupon code."""

    def __init__(self, config: Optional[CouponConfig] = None):
        self.config = config or CouponConfig()

    def discount(self, code: Optional[Any]) -> float:
        """Fixed discount for code, 0.0 when the code is not recognized."""
        if not isinstance(code, str):
            return ZERO_MONEY

        return self.config.coupons.get(code, ZERO_MONEY)


_DEFAULT_RULE = CouponRule()


def apply_fixed_coupon(code: Optional[str]) -> float:
    """Coupon discount with the default codes."""
    return _DEFAULT_RULE.discount(code)
