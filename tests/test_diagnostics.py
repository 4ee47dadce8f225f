from __future__ import annotations

import numpy as np
import pytest

from binomial_calculator import calculate_option_metrics
from binomial_calculator.diagnostics import results_table, strike_sweep, tree_series


def test_tree_series_branches(make_inputs) -> None:
    inputs = make_inputs()
    res = calculate_option_metrics(inputs)
    data = tree_series(inputs, res)

    assert set(data) == {"asset", "call", "put"}
    np.testing.assert_array_equal(data["asset"]["t"], [0.0, 1.0])
    np.testing.assert_array_equal(data["asset"]["up"], [40.0, 56.0])
    np.testing.assert_array_equal(data["asset"]["down"], [40.0, 32.0])
    np.testing.assert_allclose(data["call"]["up"], [res.C0, 6.0])
    np.testing.assert_allclose(data["put"]["down"], [res.P0, 18.0])


def test_strike_sweep_matches_single_pricing(make_inputs) -> None:
    inputs = make_inputs()
    strikes = np.linspace(20.0, 70.0, 11)
    data = strike_sweep(inputs, strikes)

    assert data["C0"].shape == strikes.shape
    i = int(np.argmin(np.abs(strikes - 50.0)))
    res = calculate_option_metrics(inputs)
    assert data["C0"][i] == pytest.approx(res.C0)
    assert data["P0"][i] == pytest.approx(res.P0)

    # call value non-increasing, put value non-decreasing in strike
    assert np.all(np.diff(data["C0"]) <= 1e-12)
    assert np.all(np.diff(data["P0"]) >= -1e-12)


def test_strike_sweep_rejects_empty_grid(make_inputs) -> None:
    with pytest.raises(ValueError):
        strike_sweep(make_inputs(), [])


def test_results_table(make_inputs) -> None:
    inputs = make_inputs()
    df = results_table(inputs)

    assert list(df.columns) == ["section", "quantity", "symbol", "value"]
    assert (df["section"] == "input").sum() == 5
    by_symbol = df.set_index("symbol")["value"]
    assert by_symbol["Pd"] == 18.0
    assert by_symbol["r"] == 5.0
    assert by_symbol["C0"] == pytest.approx(calculate_option_metrics(inputs).C0)
