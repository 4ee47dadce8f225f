from __future__ import annotations

import math

import pytest

from binomial_calculator import PricingMethod, calculate_option_metrics, validate_all
from binomial_calculator.pricers.one_period import (
    price_by_replication,
    price_by_risk_neutral,
)


def test_textbook_example_payoffs_and_prices(make_inputs) -> None:
    res = calculate_option_metrics(make_inputs())

    assert (res.Cu, res.Cd, res.Pu, res.Pd) == (6.0, 0.0, 0.0, 18.0)
    assert math.isclose(res.HRc, 0.25, abs_tol=1e-15)
    assert math.isclose(res.HRp, -0.75, abs_tol=1e-15)
    assert math.isclose(res.p, 10.0 / 24.0, abs_tol=1e-15)

    # C0 = 40*0.25 - (0.25*56 - 6)/1.05 ; P0 = 40*(-0.75) + 42/1.05
    assert math.isclose(res.C0, 10.0 - 8.0 / 1.05, abs_tol=1e-12)
    assert math.isclose(res.P0, 10.0, abs_tol=1e-12)
    assert res.is_valid
    assert res.is_finite


def test_valid_inputs_price_as_valid(make_inputs) -> None:
    inputs = make_inputs(s0=100.0, su=120.0, sd=90.0, strike=100.0, risk_free_rate=2.0)
    assert validate_all(inputs) == {}
    assert calculate_option_metrics(inputs).is_valid


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"strike": 30.0},
        {"strike": 60.0},
        {"s0": 100.0, "su": 130.0, "sd": 80.0, "strike": 95.0, "risk_free_rate": -3.0},
        {"risk_free_rate": 0.0},
    ],
)
def test_replication_and_risk_neutral_agree(make_inputs, overrides) -> None:
    inputs = make_inputs(**overrides)
    rep = calculate_option_metrics(inputs, method=PricingMethod.REPLICATION)
    rn = calculate_option_metrics(inputs, method="risk_neutral")

    assert math.isclose(rep.C0, rn.C0, rel_tol=1e-12, abs_tol=1e-12)
    assert math.isclose(rep.P0, rn.P0, rel_tol=1e-12, abs_tol=1e-12)
    # hedge ratios and p are reported whichever derivation prices
    assert (rep.HRc, rep.HRp, rep.p) == (rn.HRc, rn.HRp, rn.p)


def test_standalone_derivations_match_engine(make_inputs) -> None:
    inputs = make_inputs()
    res = calculate_option_metrics(inputs)
    r = inputs.rate

    c_rn = price_by_risk_neutral(up=res.Cu, down=res.Cd, p=res.p, r=r)
    c_rep = price_by_replication(up=res.Cu, hr=res.HRc, s0=inputs.s0, su=inputs.su, r=r)
    assert math.isclose(c_rn, res.C0, abs_tol=1e-12)
    assert c_rep == res.C0


def test_no_rounding_inside_engine(make_inputs) -> None:
    res = calculate_option_metrics(make_inputs())
    assert res.C0 != round(res.C0, 2)


def test_equal_states_give_non_finite_values_without_raising(make_inputs) -> None:
    res = calculate_option_metrics(make_inputs(s0=50.0, su=50.0, sd=50.0))

    assert not math.isfinite(res.HRc)
    assert not math.isfinite(res.HRp)
    assert not math.isfinite(res.p)
    assert not math.isfinite(res.C0)
    assert not res.is_finite
    assert not res.is_valid


def test_risk_neutral_probability_is_not_clamped(make_inputs) -> None:
    """Validated inputs can still imply p > 1; the engine reports it as is."""
    inputs = make_inputs(s0=40.0, su=41.0, sd=32.0, risk_free_rate=10.0)
    assert validate_all(inputs) == {}

    res = calculate_option_metrics(inputs)
    assert res.p > 1.0
    assert res.is_valid


def test_is_valid_flags_rate_at_or_below_minus_one(make_inputs) -> None:
    assert not calculate_option_metrics(make_inputs(risk_free_rate=-100.0)).is_valid


def test_unknown_method_raises(make_inputs) -> None:
    with pytest.raises(ValueError):
        calculate_option_metrics(make_inputs(), method="trinomial")


def test_result_is_immutable(make_inputs) -> None:
    res = calculate_option_metrics(make_inputs())
    with pytest.raises(AttributeError):
        res.C0 = 0.0  # type: ignore[misc]
