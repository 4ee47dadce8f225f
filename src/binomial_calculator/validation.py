"""Input validation for the one-period calculator.

Two layers of checks gate pricing:

- field rules (:data:`VALIDATION_RULES`): each input must be a finite number
  within its bounds;
- cross-field rules: the up state must exceed the down state, and the current
  price must lie strictly between them.

Nothing here raises for bad *values*: every problem is reported as a message in
the returned :data:`~binomial_calculator.types.ValidationErrors` mapping, keyed
by field name or by the cross-field keys :data:`UP_DOWN` and
:data:`CURRENT_PRICE`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any

from .types import FIELDS, MarketInputs, ValidationErrors, canonical_field

UP_DOWN = "up_down"
CURRENT_PRICE = "current_price"

UP_DOWN_MESSAGE = "Up-state must exceed down-state"
CURRENT_PRICE_MESSAGE = "Current price should be between down and up states"


@dataclass(frozen=True, slots=True)
class FieldRule:
    """Bounds and display label for one input field.

    Parameters
    ----------
    label : str
        Human-readable name used in messages.
    minimum, maximum : float or None
        Bounds; ``None`` disables the check.
    min_inclusive : bool
        Whether ``value == minimum`` passes.
    unit : str
        Suffix appended to bounds in messages (e.g. ``"%"``).
    """

    label: str
    minimum: float | None = None
    maximum: float | None = None
    min_inclusive: bool = True
    unit: str = ""

    def check(self, value: Any) -> str | None:
        if not _is_number(value):
            return f"{self.label} is required"

        if self.minimum is not None:
            if self.min_inclusive and value < self.minimum:
                return f"{self.label} must be at least {_fmt(self.minimum)}{self.unit}"
            if not self.min_inclusive and value <= self.minimum:
                return (
                    f"{self.label} must be greater than {_fmt(self.minimum)}{self.unit}"
                )

        if self.maximum is not None and value > self.maximum:
            return f"{self.label} cannot exceed {_fmt(self.maximum)}{self.unit}"

        return None


VALIDATION_RULES: dict[str, FieldRule] = {
    "s0": FieldRule("Current price", minimum=0.0, min_inclusive=False),
    "su": FieldRule("Up-state price", minimum=0.0, min_inclusive=False),
    "sd": FieldRule("Down-state price", minimum=0.0, min_inclusive=False),
    "strike": FieldRule("Strike price", minimum=0.0, min_inclusive=False),
    "risk_free_rate": FieldRule(
        "Risk-free rate", minimum=-99.0, maximum=100.0, unit="%"
    ),
}


def _is_number(value: Any) -> bool:
    # bool is a Real subclass but never a meaningful price
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False


def _fmt(bound: float) -> str:
    return f"{bound:g}"


def _positive(*values: Any) -> bool:
    return all(_is_number(v) and v > 0 for v in values)


def validate_field(field: str, value: Any) -> str | None:
    """Check one field against its rule.

    Returns the error message, or ``None`` when the value passes. Unknown field
    names have no rule and always pass.
    """
    rule = VALIDATION_RULES.get(canonical_field(field))
    if rule is None:
        return None
    return rule.check(value)


def _as_mapping(inputs: MarketInputs | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(inputs, MarketInputs):
        return inputs.as_dict()
    return {canonical_field(k): v for k, v in inputs.items()}


def validate_all(inputs: MarketInputs | Mapping[str, Any]) -> ValidationErrors:
    """Validate every field, then the cross-field ordering rules.

    Cross-field rules only run when the prices they involve are all positive
    numbers, so a missing price yields one field error rather than a cascade.
    """
    values = _as_mapping(inputs)
    errors: ValidationErrors = {}

    for name in FIELDS:
        msg = validate_field(name, values.get(name))
        if msg is not None:
            errors[name] = msg

    s0, su, sd = values.get("s0"), values.get("su"), values.get("sd")

    if _positive(su, sd) and su <= sd:
        errors[UP_DOWN] = UP_DOWN_MESSAGE

    if _positive(s0, su, sd) and not (sd < s0 < su):
        errors[CURRENT_PRICE] = CURRENT_PRICE_MESSAGE

    return errors


def has_errors(errors: Mapping[str, str]) -> bool:
    return len(errors) > 0
