from __future__ import annotations

import pandas as pd

from ..pricers.one_period import calculate_option_metrics
from ..types import MarketInputs, PricingResult

_INPUT_ROWS: tuple[tuple[str, str, str], ...] = (
    ("Current price", "S0", "s0"),
    ("Up-state price", "Su", "su"),
    ("Down-state price", "Sd", "sd"),
    ("Strike price", "K", "strike"),
    ("Risk-free rate (%)", "r", "risk_free_rate"),
)

_RESULT_ROWS: tuple[tuple[str, str, str], ...] = (
    ("Call option price", "C0", "C0"),
    ("Call hedge ratio", "HRc", "HRc"),
    ("Call payoff (up)", "Cu", "Cu"),
    ("Call payoff (down)", "Cd", "Cd"),
    ("Put option price", "P0", "P0"),
    ("Put hedge ratio", "HRp", "HRp"),
    ("Put payoff (up)", "Pu", "Pu"),
    ("Put payoff (down)", "Pd", "Pd"),
    ("Risk-neutral probability", "p", "p"),
)


def results_table(
    inputs: MarketInputs, result: PricingResult | None = None
) -> pd.DataFrame:
    """Inputs and outputs as one tidy table (unrounded; formatting is up to the caller).

    Columns: ``section`` ("input"/"output"), ``quantity``, ``symbol``, ``value``.
    """
    result = result or calculate_option_metrics(inputs)

    rows: list[dict[str, object]] = []
    for quantity, symbol, attr in _INPUT_ROWS:
        rows.append(
            {
                "section": "input",
                "quantity": quantity,
                "symbol": symbol,
                "value": float(getattr(inputs, attr)),
            }
        )
    for quantity, symbol, attr in _RESULT_ROWS:
        rows.append(
            {
                "section": "output",
                "quantity": quantity,
                "symbol": symbol,
                "value": float(getattr(result, attr)),
            }
        )

    return pd.DataFrame(rows, columns=["section", "quantity", "symbol", "value"])
