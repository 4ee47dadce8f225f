from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any

from .exceptions import UnknownFieldError

FIELDS: tuple[str, ...] = ("s0", "su", "sd", "strike", "risk_free_rate")

# camelCase keys used by browser-side collaborators
FIELD_ALIASES: dict[str, str] = {
    "riskFreeRate": "risk_free_rate",
}


def canonical_field(name: str) -> str:
    """Map an input key (snake_case or camelCase alias) to its canonical name."""
    return FIELD_ALIASES.get(name, name)


class OptionType(str, Enum):
    """Option contract type.

    Attributes
    ----------
    CALL : str
        Call option ("call").
    PUT : str
        Put option ("put").
    """

    CALL = "call"
    PUT = "put"


@dataclass(frozen=True, slots=True)
class MarketInputs:
    """The five market observables of the one-period binomial model.

    Parameters
    ----------
    s0 : float
        Current price of the underlying, :math:`S_0`.
    su : float
        Underlying price one period ahead in the up state, :math:`S_u`.
    sd : float
        Underlying price one period ahead in the down state, :math:`S_d`.
    strike : float
        Strike price of both the call and the put, :math:`K`.
    risk_free_rate : float
        Simple risk-free rate for the period, **in percent** (``5`` means 5%).

    Notes
    -----
    No constraint is enforced at construction: invalid combinations are
    representable so that they can be reported by
    :func:`~binomial_calculator.validation.validate_all`.
    """

    s0: float
    su: float
    sd: float
    strike: float
    risk_free_rate: float

    @property
    def rate(self) -> float:
        """Decimal rate, ``risk_free_rate / 100``."""
        return self.risk_free_rate / 100.0

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_mapping(
        cls, values: Mapping[str, Any], defaults: MarketInputs | None = None
    ) -> MarketInputs:
        """Build inputs from a raw mapping.

        Keys may use the camelCase aliases in :data:`FIELD_ALIASES`. Missing
        keys are taken from ``defaults``; without defaults every field is
        required.

        Raises
        ------
        UnknownFieldError
            If a key is not one of :data:`FIELDS` (or an alias).
        KeyError
            If a field is missing and no ``defaults`` are given.
        """
        merged: dict[str, Any] = defaults.as_dict() if defaults is not None else {}
        for key, value in values.items():
            name = canonical_field(key)
            if name not in FIELDS:
                raise UnknownFieldError(key, FIELDS)
            merged[name] = value
        return cls(**{name: merged[name] for name in FIELDS})


@dataclass(frozen=True, slots=True)
class PricingResult:
    """Immutable snapshot of one-period pricing output.

    Attributes
    ----------
    Cu, Cd : float
        Call payoffs in the up/down state.
    Pu, Pd : float
        Put payoffs in the up/down state.
    HRc, HRp : float
        Hedge ratios (replicating stock position) of the call/put.
    C0, P0 : float
        Arbitrage-free call/put value today.
    p : float
        Risk-neutral probability of the up state. Not clamped to ``[0, 1]``.
    is_valid : bool
        Self-check ``s0, su, sd > 0 and su > sd and r > -1``.
    """

    Cu: float
    Cd: float
    Pu: float
    Pd: float
    HRc: float
    HRp: float
    C0: float
    P0: float
    p: float
    is_valid: bool

    @property
    def is_finite(self) -> bool:
        """False when any numeric field is inf/nan (degenerate ``su == sd``)."""
        return all(
            math.isfinite(getattr(self, f.name))
            for f in fields(self)
            if f.name != "is_valid"
        )

    def as_dict(self) -> dict[str, float | bool]:
        return asdict(self)


ValidationErrors = dict[str, str]


@dataclass(frozen=True, slots=True)
class ApplicationState:
    """One consistent view of the calculator, handed to every listener.

    A new snapshot is created on each store update, so a listener can keep a
    reference without seeing it change underneath.
    """

    inputs: MarketInputs
    errors: Mapping[str, str] = field(default_factory=dict)
    result: PricingResult | None = None

    @property
    def has_result(self) -> bool:
        return self.result is not None and self.result.is_finite
