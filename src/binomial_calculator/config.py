from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .types import MarketInputs


class PricingMethod(str, Enum):
    REPLICATION = "replication"  # hedge-ratio (replicating portfolio) pricing
    RISK_NEUTRAL = "risk_neutral"  # discounted risk-neutral expectation


def default_inputs() -> MarketInputs:
    return MarketInputs(s0=40.0, su=56.0, sd=32.0, strike=50.0, risk_free_rate=5.0)


@dataclass(frozen=True, slots=True)
class SelfCheckConfig:
    tolerance: float = 1e-9
    reference: MarketInputs = field(default_factory=default_inputs)

    def __post_init__(self) -> None:
        if self.tolerance <= 0:
            raise ValueError("tolerance must be > 0")


@dataclass(frozen=True, slots=True)
class CalculatorConfig:
    initial_inputs: MarketInputs = field(default_factory=default_inputs)
    method: PricingMethod = PricingMethod.REPLICATION
    self_check: SelfCheckConfig = field(default_factory=SelfCheckConfig)

    def __post_init__(self) -> None:
        # accept plain strings ("risk_neutral") from callers
        object.__setattr__(self, "method", PricingMethod(self.method))
