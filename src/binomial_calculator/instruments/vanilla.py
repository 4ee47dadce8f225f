"""Vanilla (call/put) payoffs at expiry.

Payoffs accept scalars or numpy arrays of terminal prices, so the same
functions serve the pricer (one up and one down state) and the strike sweeps
in :mod:`binomial_calculator.diagnostics`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import overload

import numpy as np

from ..types import OptionType
from ..typing import FloatArray


@overload
def call_payoff(ST: float, K: float) -> float: ...
@overload
def call_payoff(ST: FloatArray, K: float) -> FloatArray: ...
def call_payoff(ST: float | FloatArray, K: float) -> float | FloatArray:
    return np.maximum(ST - K, 0.0)


@overload
def put_payoff(ST: float, K: float) -> float: ...
@overload
def put_payoff(ST: FloatArray, K: float) -> FloatArray: ...
def put_payoff(ST: float | FloatArray, K: float) -> float | FloatArray:
    return np.maximum(K - ST, 0.0)


@dataclass(frozen=True, slots=True)
class VanillaPayoff:
    """Callable, vectorized call/put payoff."""

    kind: OptionType
    strike: float

    @overload
    def __call__(self, ST: float) -> float: ...
    @overload
    def __call__(self, ST: FloatArray) -> FloatArray: ...

    def __call__(self, ST: float | FloatArray) -> float | FloatArray:
        if self.kind == OptionType.CALL:
            out = call_payoff(ST, K=self.strike)
        elif self.kind == OptionType.PUT:
            out = put_payoff(ST, K=self.strike)
        else:
            raise ValueError(f"Unsupported option kind: {self.kind}")

        # Scalar in, Python float out
        if np.ndim(out) == 0:
            return float(out)
        return out
