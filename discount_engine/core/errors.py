"""Error taxonomy of the discount engine.

- InvalidInputError: a rule received a value outside its input domain
  (negative amount, negative or non-integer item count).
- ConfigurationError: a rule configuration is internally inconsistent.

Both derive from ValueError so callers that already catch ValueError from
validators keep working.
"""

from typing import Any


class InvalidInputError(ValueError):
    """Rule input outside its contract domain."""

    def __init__(self, field: str, value: Any, explanation: str):
        self.field = field
        self.value = value
        self.explanation = explanation
        super().__init__(f"[INVALID_INPUT:{field}] {explanation} (got {value!r})")


class ConfigurationError(ValueError):
    """Inconsistent thresholds or rates in a rule configuration."""
