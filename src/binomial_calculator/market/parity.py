from __future__ import annotations

from dataclasses import dataclass

from ..pricers.one_period import risk_neutral_probability
from ..types import MarketInputs, PricingResult


def forward_discounted(inputs: MarketInputs) -> float:
    """S0 - K/(1+r) (the RHS of one-period put-call parity)."""
    return inputs.s0 - inputs.strike / (1.0 + inputs.rate)


def put_call_parity_residual(*, call: float, put: float, inputs: MarketInputs) -> float:
    """
    Residual = (C - P) - (S0 - K/(1+r)).
    Should be ~0 for any one-period result with su != sd.
    """
    return (call - put) - forward_discounted(inputs)


@dataclass(frozen=True, slots=True)
class NoArbitrageReport:
    ok: bool
    p: float
    growth: float  # (1+r)*S0
    message: str


def check_no_arbitrage(inputs: MarketInputs) -> NoArbitrageReport:
    """
    Diagnostic check of the one-period no-arbitrage condition

      sd < (1+r)*S0 < su   (equivalently 0 < p < 1).

    The pricer never enforces this; a validated input set can still fail it
    when the rate is large relative to the spread of the two states.
    """
    growth = (1.0 + inputs.rate) * inputs.s0
    p = risk_neutral_probability(
        s0=inputs.s0, su=inputs.su, sd=inputs.sd, r=inputs.rate
    )

    if inputs.su <= inputs.sd:
        return NoArbitrageReport(
            ok=False, p=p, growth=growth, message="Need su > sd."
        )

    ok = inputs.sd < growth < inputs.su
    if ok:
        msg = "OK"
    elif growth >= inputs.su:
        msg = f"Riskless growth {growth:.6g} >= su={inputs.su:.6g}: p*={p:.6g} > 1."
    else:
        msg = f"Riskless growth {growth:.6g} <= sd={inputs.sd:.6g}: p*={p:.6g} < 0."

    return NoArbitrageReport(ok=ok, p=p, growth=growth, message=msg)


def result_parity_residual(result: PricingResult, inputs: MarketInputs) -> float:
    return put_call_parity_residual(call=result.C0, put=result.P0, inputs=inputs)
