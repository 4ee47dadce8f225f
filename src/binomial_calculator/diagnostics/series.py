from __future__ import annotations

import dataclasses
from collections.abc import Sequence

import numpy as np

from ..config import PricingMethod
from ..pricers.one_period import calculate_option_metrics
from ..types import MarketInputs, PricingResult


def _branches(v0: float, vu: float, vd: float) -> dict[str, np.ndarray]:
    return {
        "t": np.array([0.0, 1.0], dtype=float),
        "up": np.array([v0, vu], dtype=float),
        "down": np.array([v0, vd], dtype=float),
    }


def tree_series(
    inputs: MarketInputs, result: PricingResult | None = None
) -> dict[str, dict[str, np.ndarray]]:
    """Data behind the asset/call/put one-period tree charts.

    Each entry holds ``t = [0, 1]`` and the up/down branch values starting at
    the t=0 node, ready for any plotting front end.
    """
    result = result or calculate_option_metrics(inputs)
    return {
        "asset": _branches(inputs.s0, inputs.su, inputs.sd),
        "call": _branches(result.C0, result.Cu, result.Cd),
        "put": _branches(result.P0, result.Pu, result.Pd),
    }


def strike_sweep(
    inputs: MarketInputs,
    strikes: Sequence[float] | np.ndarray,
    *,
    method: PricingMethod | str = PricingMethod.REPLICATION,
) -> dict[str, np.ndarray]:
    """Price the call and put across a grid of strikes, other inputs fixed."""
    K = np.asarray(list(strikes), dtype=float)
    if K.size == 0:
        raise ValueError("strikes must be non-empty")
    if np.any(~np.isfinite(K)):
        raise ValueError("strikes must be finite")

    results = [
        calculate_option_metrics(dataclasses.replace(inputs, strike=float(k)), method=method)
        for k in K
    ]

    return {
        "strike": K,
        "C0": np.array([res.C0 for res in results], dtype=float),
        "P0": np.array([res.P0 for res in results], dtype=float),
        "HRc": np.array([res.HRc for res in results], dtype=float),
        "HRp": np.array([res.HRp for res in results], dtype=float),
    }
