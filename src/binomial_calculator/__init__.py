"""
binomial_calculator

One-period binomial option pricing with input validation and a reactive
state store.

The main entry points are re-exported at the top level, so you can write:

    from binomial_calculator import MarketInputs, ReactiveStore, calculate_option_metrics
"""

from .config import CalculatorConfig, PricingMethod, SelfCheckConfig
from .exceptions import UnknownFieldError
from .pricers.one_period import calculate_option_metrics
from .self_check import SelfCheckResult, run_self_checks
from .state import CalculatorPhase, ReactiveStore, parse_input
from .types import (
    FIELDS,
    ApplicationState,
    MarketInputs,
    OptionType,
    PricingResult,
    ValidationErrors,
)
from .validation import VALIDATION_RULES, has_errors, validate_all, validate_field

__all__ = [
    # Types
    "FIELDS",
    "ApplicationState",
    "MarketInputs",
    "OptionType",
    "PricingResult",
    "ValidationErrors",
    # Config
    "CalculatorConfig",
    "PricingMethod",
    "SelfCheckConfig",
    # Errors
    "UnknownFieldError",
    # Validation
    "VALIDATION_RULES",
    "has_errors",
    "validate_all",
    "validate_field",
    # Pricing
    "calculate_option_metrics",
    # Store
    "CalculatorPhase",
    "ReactiveStore",
    "parse_input",
    # Checks
    "SelfCheckResult",
    "run_self_checks",
]
