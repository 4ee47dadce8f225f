from __future__ import annotations

import math

import pytest

from binomial_calculator.validation import (
    CURRENT_PRICE,
    CURRENT_PRICE_MESSAGE,
    UP_DOWN,
    UP_DOWN_MESSAGE,
    has_errors,
    validate_all,
    validate_field,
)


def test_valid_inputs_have_no_errors(make_inputs) -> None:
    errors = validate_all(make_inputs())
    assert errors == {}
    assert not has_errors(errors)


@pytest.mark.parametrize("bad", [None, math.nan, math.inf, -math.inf, "40", True])
def test_non_numbers_fail_required(bad) -> None:
    assert validate_field("s0", bad) == "Current price is required"


def test_prices_must_be_positive() -> None:
    assert validate_field("strike", 0.0) == "Strike price must be greater than 0"
    assert validate_field("su", -1.0) == "Up-state price must be greater than 0"
    assert validate_field("sd", 0.01) is None


def test_rate_bounds() -> None:
    assert validate_field("risk_free_rate", 150.0) == "Risk-free rate cannot exceed 100%"
    assert validate_field("risk_free_rate", -100.0) == "Risk-free rate must be at least -99%"
    assert validate_field("risk_free_rate", -99.0) is None
    assert validate_field("risk_free_rate", 100.0) is None


def test_camel_case_alias_and_unknown_field() -> None:
    assert validate_field("riskFreeRate", 150.0) == "Risk-free rate cannot exceed 100%"
    assert validate_field("volatility", -5.0) is None


def test_rate_above_cap_reported_under_field_key(make_inputs) -> None:
    errors = validate_all(make_inputs(risk_free_rate=150.0))
    assert set(errors) == {"risk_free_rate"}
    assert errors["risk_free_rate"].endswith("cannot exceed 100%")


def test_equal_up_and_down_states(make_inputs) -> None:
    errors = validate_all(make_inputs(s0=50.0, su=50.0, sd=50.0))
    assert errors[UP_DOWN] == UP_DOWN_MESSAGE
    assert errors[CURRENT_PRICE] == CURRENT_PRICE_MESSAGE


def test_current_price_on_up_state_boundary(make_inputs) -> None:
    errors = validate_all(make_inputs(s0=100.0, su=100.0, sd=90.0))
    assert CURRENT_PRICE in errors
    assert UP_DOWN not in errors


def test_cross_rules_skipped_when_a_price_is_missing(make_inputs) -> None:
    """A missing price gives one field error, not a cascade of ordering errors."""
    errors = validate_all(make_inputs(sd=math.nan, su=10.0))
    assert set(errors) == {"sd"}


def test_accepts_raw_mappings_with_aliases(base_params) -> None:
    raw = {**base_params}
    raw["riskFreeRate"] = raw.pop("risk_free_rate")
    assert validate_all(raw) == {}

    del raw["s0"]
    assert validate_all(raw) == {"s0": "Current price is required"}


def test_errors_are_fresh_per_call(make_inputs) -> None:
    first = validate_all(make_inputs(su=10.0))
    second = validate_all(make_inputs())
    assert first and second == {}
    first.clear()
    assert validate_all(make_inputs(su=10.0))


def test_integers_beyond_float_range_are_reported_not_raised(base_params) -> None:
    assert validate_field("s0", 10**400) == "Current price is required"

    raw = {**base_params, "s0": 10**400}
    errors = validate_all(raw)
    assert errors == {"s0": "Current price is required"}
