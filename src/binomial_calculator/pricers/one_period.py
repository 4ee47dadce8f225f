from __future__ import annotations

from typing import Literal

import numpy as np

from ..config import PricingMethod
from ..instruments.vanilla import VanillaPayoff
from ..types import MarketInputs, OptionType, PricingResult

# ----------------------------
# Arithmetic helpers
# ----------------------------


def _div(num: float, den: float) -> float:
    """IEEE division: x/0 gives +-inf, 0/0 gives nan, never raises."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))


def _mul(a: float, b: float) -> float:
    # inf * 0 is nan under IEEE; keep it quiet like _div
    with np.errstate(invalid="ignore"):
        return float(np.float64(a) * np.float64(b))


def hedge_ratio(up: float, down: float, *, su: float, sd: float) -> float:
    """Option-payoff spread over asset-price spread between the two states."""
    return _div(up - down, su - sd)


def risk_neutral_probability(*, s0: float, su: float, sd: float, r: float) -> float:
    """Up-state probability under which discounted prices are martingales.

    Computed unconditionally: no clamping to ``[0, 1]``.
    """
    return _div((1.0 + r) * s0 - sd, su - sd)


# ----------------------------
# The two derivations
# ----------------------------


def price_by_risk_neutral(
    *, up: float, down: float, p: float, r: float
) -> float:
    """Discounted risk-neutral expectation ``(p*Vu + (1-p)*Vd) / (1+r)``."""
    expectation = _mul(p, up) + _mul(1.0 - p, down)
    return _div(expectation, 1.0 + r)


def price_by_replication(
    *, up: float, hr: float, s0: float, su: float, r: float
) -> float:
    """Replicating portfolio: ``hr`` shares less the borrowing ``(hr*su - Vu)/(1+r)``."""
    borrowing = _div(_mul(hr, su) - up, 1.0 + r)
    return _mul(s0, hr) - borrowing


# ----------------------------
# Engine
# ----------------------------


def calculate_option_metrics(
    inputs: MarketInputs,
    *,
    method: PricingMethod | Literal["replication", "risk_neutral"] = (
        PricingMethod.REPLICATION
    ),
) -> PricingResult:
    """One-period binomial call/put pricing.

    Parameters
    ----------
    inputs : MarketInputs
        Market observables; ``risk_free_rate`` is in percent.
    method : {"replication", "risk_neutral"}
        Which derivation computes ``C0``/``P0``. Both give the same value up
        to rounding; ``HRc``, ``HRp`` and ``p`` are populated either way.

    Returns
    -------
    PricingResult
        Unrounded double-precision values.

    Notes
    -----
    Inputs are not validated here. With ``su == sd`` the hedge ratios, ``p``
    and the prices come out as inf/nan rather than raising; run
    :func:`~binomial_calculator.validation.validate_all` first.
    """
    method = PricingMethod(method)

    s0 = float(inputs.s0)
    su = float(inputs.su)
    sd = float(inputs.sd)
    K = float(inputs.strike)
    r = inputs.rate

    call = VanillaPayoff(kind=OptionType.CALL, strike=K)
    put = VanillaPayoff(kind=OptionType.PUT, strike=K)

    Cu, Cd = call(su), call(sd)
    Pu, Pd = put(su), put(sd)

    HRc = hedge_ratio(Cu, Cd, su=su, sd=sd)
    HRp = hedge_ratio(Pu, Pd, su=su, sd=sd)
    p = risk_neutral_probability(s0=s0, su=su, sd=sd, r=r)

    if method == PricingMethod.REPLICATION:
        C0 = price_by_replication(up=Cu, hr=HRc, s0=s0, su=su, r=r)
        P0 = price_by_replication(up=Pu, hr=HRp, s0=s0, su=su, r=r)
    elif method == PricingMethod.RISK_NEUTRAL:
        C0 = price_by_risk_neutral(up=Cu, down=Cd, p=p, r=r)
        P0 = price_by_risk_neutral(up=Pu, down=Pd, p=p, r=r)
    else:  # pragma: no cover
        raise ValueError(f"Unsupported pricing method: {method}")

    return PricingResult(
        Cu=Cu,
        Cd=Cd,
        Pu=Pu,
        Pd=Pd,
        HRc=HRc,
        HRp=HRp,
        C0=C0,
        P0=P0,
        p=p,
        is_valid=s0 > 0 and su > 0 and sd > 0 and su > sd and r > -1,
    )
