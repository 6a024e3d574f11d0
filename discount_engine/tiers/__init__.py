"""Tiers — finite-state view of the bulk discount brackets."""

from .state_machine import BulkTier, BulkTierStateMachine, BulkTierTransitionResult

__all__ = [
    "BulkTier",
    "BulkTierStateMachine",
    "BulkTierTransitionResult",
]
