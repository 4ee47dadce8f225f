"""Pytest helpers for the binomial_calculator library."""

from __future__ import annotations

import pytest

from binomial_calculator.state import ReactiveStore
from binomial_calculator.types import MarketInputs


@pytest.fixture
def base_params() -> dict:
    """Textbook one-period example used across tests."""
    return {
        "s0": 40.0,
        "su": 56.0,
        "sd": 32.0,
        "strike": 50.0,
        "risk_free_rate": 5.0,
    }


@pytest.fixture
def make_inputs(base_params):
    """Factory fixture: base parameters with keyword overrides."""

    def _make(**overrides: float) -> MarketInputs:
        return MarketInputs(**{**base_params, **overrides})

    return _make


@pytest.fixture
def store(make_inputs) -> ReactiveStore:
    return ReactiveStore(make_inputs())
