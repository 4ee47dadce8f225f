"""binomial_calculator.instruments

Payoffs of the two contracts priced by the calculator: a European call and a
European put expiring after one period.
"""

from .vanilla import VanillaPayoff, call_payoff, put_payoff

__all__ = [
    "VanillaPayoff",
    "call_payoff",
    "put_payoff",
]
