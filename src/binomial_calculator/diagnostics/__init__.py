"""binomial_calculator.diagnostics

Presentation-neutral data for charts and tables. Nothing here draws or
formats; renderers consume the arrays and frames as they see fit.
"""

from .series import strike_sweep, tree_series
from .tables import results_table

__all__ = [
    "results_table",
    "strike_sweep",
    "tree_series",
]
