from .parity import (
    NoArbitrageReport,
    check_no_arbitrage,
    forward_discounted,
    put_call_parity_residual,
    result_parity_residual,
)

__all__ = [
    "NoArbitrageReport",
    "check_no_arbitrage",
    "forward_discounted",
    "put_call_parity_residual",
    "result_parity_residual",
]
