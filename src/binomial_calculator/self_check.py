"""Startup consistency checks.

Meant to run once when an application boots the calculator: a failure points
at a broken installation or a regression in the pricer, not at user input.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import PricingMethod, SelfCheckConfig
from .logging.config import get_logger
from .market.parity import result_parity_residual
from .pricers.one_period import calculate_option_metrics
from .validation import validate_all

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SelfCheckResult:
    name: str
    passed: bool
    detail: str


def run_self_checks(cfg: SelfCheckConfig | None = None) -> tuple[SelfCheckResult, ...]:
    """Price the reference inputs and check internal consistency.

    Checks
    ------
    - the reference inputs validate cleanly and price with ``is_valid``;
    - replication and risk-neutral derivations agree within tolerance;
    - one-period put-call parity holds within tolerance.
    """
    cfg = cfg or SelfCheckConfig()
    ref = cfg.reference
    tol = cfg.tolerance

    out: list[SelfCheckResult] = []

    errors = validate_all(ref)
    rep = calculate_option_metrics(ref, method=PricingMethod.REPLICATION)
    out.append(
        SelfCheckResult(
            name="reference_inputs_valid",
            passed=not errors and rep.is_valid and rep.is_finite,
            detail="OK" if not errors else f"validation errors: {errors}",
        )
    )

    rn = calculate_option_metrics(ref, method=PricingMethod.RISK_NEUTRAL)
    dC = abs(rep.C0 - rn.C0)
    dP = abs(rep.P0 - rn.P0)
    out.append(
        SelfCheckResult(
            name="derivations_agree",
            passed=math.isclose(rep.C0, rn.C0, rel_tol=0.0, abs_tol=tol)
            and math.isclose(rep.P0, rn.P0, rel_tol=0.0, abs_tol=tol),
            detail=f"|dC0|={dC:.3g}, |dP0|={dP:.3g}",
        )
    )

    resid = result_parity_residual(rep, ref)
    out.append(
        SelfCheckResult(
            name="put_call_parity",
            passed=abs(resid) <= tol,
            detail=f"residual={resid:.3g}",
        )
    )

    for check in out:
        if check.passed:
            logger.info("self_check_passed", check=check.name, detail=check.detail)
        else:
            logger.warning("self_check_failed", check=check.name, detail=check.detail)

    return tuple(out)
