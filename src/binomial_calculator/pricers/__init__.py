"""binomial_calculator.pricers

Pricing engines. The calculator prices European calls and puts over a single
period with two terminal states.
"""

from .one_period import (
    calculate_option_metrics,
    hedge_ratio,
    price_by_replication,
    price_by_risk_neutral,
    risk_neutral_probability,
)

__all__ = [
    "calculate_option_metrics",
    "hedge_ratio",
    "price_by_replication",
    "price_by_risk_neutral",
    "risk_neutral_probability",
]
