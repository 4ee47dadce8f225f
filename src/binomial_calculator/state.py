"""Reactive state container for the calculator.

:class:`ReactiveStore` holds the current inputs, their validation errors and
the last pricing result. Every change goes through :meth:`ReactiveStore.set_state`,
which swaps in a new frozen :class:`~binomial_calculator.types.ApplicationState`
and synchronously notifies subscribers in subscription order.

A change of one input follows a single synchronous pipeline::

    on_input_changed(field, value)
        -> validate_all                      (VALIDATING)
        -> commit inputs, errors, result=None (no notification)
        -> update_calculations()             (INVALID | COMPUTING -> COMPUTED)
                                             one notification per cycle
        -> back to IDLE

Debouncing raw UI events belongs to the event wiring and is not done here.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from .config import CalculatorConfig
from .exceptions import UnknownFieldError
from .logging.config import get_state_logger, log_state_transition
from .pricers.one_period import calculate_option_metrics
from .types import (
    FIELDS,
    ApplicationState,
    MarketInputs,
    PricingResult,
    canonical_field,
)
from .typing import Listener
from .validation import has_errors, validate_all

logger = get_state_logger(__name__)

STATE_KEYS: tuple[str, ...] = ("inputs", "errors", "result")


class CalculatorPhase(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    COMPUTING = "computing"
    COMPUTED = "computed"


def parse_input(raw: Any) -> float:
    """Best-effort float conversion of a raw UI value.

    Unparsable values (empty strings, ``None``, text) become NaN so that the
    validator reports them as missing.
    """
    if isinstance(raw, bool) or raw is None:
        return float("nan")
    try:
        return float(raw)
    except (OverflowError, TypeError, ValueError):
        return float("nan")


def _frozen_errors(errors: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(errors))


class ReactiveStore:
    """Single-writer state container with synchronous change notification.

    Build one per application and hand it to the collaborators that need it
    (renderers, announcers, input wiring).

    Parameters
    ----------
    initial_inputs : MarketInputs, optional
        Starting inputs. Defaults to ``config.initial_inputs``.
    config : CalculatorConfig, optional
        Pricing method and defaults.
    """

    def __init__(
        self,
        initial_inputs: MarketInputs | None = None,
        *,
        config: CalculatorConfig | None = None,
    ) -> None:
        self._config = config or CalculatorConfig()
        inputs = initial_inputs or self._config.initial_inputs
        self._state = ApplicationState(
            inputs=inputs,
            errors=_frozen_errors(validate_all(inputs)),
            result=None,
        )
        self._listeners: list[Listener] = []
        self._phase = CalculatorPhase.IDLE
        self._last_outcome: CalculatorPhase | None = None

    # ----------------------------
    # Read side
    # ----------------------------

    @property
    def state(self) -> ApplicationState:
        return self._state

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    @property
    def phase(self) -> CalculatorPhase:
        return self._phase

    @property
    def last_outcome(self) -> CalculatorPhase | None:
        """``INVALID`` or ``COMPUTED`` for the last finished cycle."""
        return self._last_outcome

    # ----------------------------
    # Write side
    # ----------------------------

    def subscribe(self, listener: Listener) -> Listener:
        """Register ``listener``; it is called with every new state.

        Returns the listener so this can be used as a decorator.
        """
        self._listeners.append(listener)
        return listener

    def set_state(self, update: Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        """Shallow-merge ``update`` into the state and notify all listeners.

        Accepted keys are ``inputs``, ``errors``, ``result`` and the input
        field names (which overwrite the matching field of ``inputs``).

        Raises
        ------
        UnknownFieldError
            For any other key. The state is left untouched.
        """
        changes = dict(update or {})
        changes.update(fields)

        self._state = self._merge(changes)
        self._notify(self._state)

    def _merge(self, changes: Mapping[str, Any]) -> ApplicationState:
        current = self._state
        inputs = current.inputs
        errors = current.errors
        result = current.result

        field_updates: dict[str, Any] = {}
        for key, value in changes.items():
            name = canonical_field(key)
            if name == "inputs":
                inputs = (
                    value
                    if isinstance(value, MarketInputs)
                    else MarketInputs.from_mapping(value, defaults=inputs)
                )
            elif name == "errors":
                errors = _frozen_errors(value)
            elif name == "result":
                result = value
            elif name in FIELDS:
                field_updates[name] = value
            else:
                raise UnknownFieldError(key, STATE_KEYS + FIELDS)

        if field_updates:
            inputs = dataclasses.replace(inputs, **field_updates)

        return ApplicationState(inputs=inputs, errors=errors, result=result)

    def _notify(self, state: ApplicationState) -> None:
        for listener in self._listeners:
            listener(state)

    def _transition(
        self, to_phase: CalculatorPhase, trigger: str, **context: Any
    ) -> None:
        log_state_transition(
            logger,
            from_phase=self._phase.value,
            to_phase=to_phase.value,
            trigger=trigger,
            context=context or None,
        )
        self._phase = to_phase

    def _return_to_idle(self, trigger: str) -> None:
        if self._phase is not CalculatorPhase.IDLE:
            self._transition(CalculatorPhase.IDLE, trigger)

    # ----------------------------
    # Orchestration
    # ----------------------------

    def update_calculations(self) -> PricingResult | None:
        """Price the current inputs, or clear the result if they are invalid.

        Safe to call repeatedly: unchanged state gives an identical result.
        A fault raised by the engine is logged and leaves ``result`` as None.
        """
        state = self._state
        trigger = "update_calculations"

        try:
            if has_errors(state.errors):
                self._transition(
                    CalculatorPhase.INVALID, trigger, errors=dict(state.errors)
                )
                self._last_outcome = CalculatorPhase.INVALID
                self.set_state(result=None)
                return None

            self._transition(CalculatorPhase.COMPUTING, trigger)
            try:
                result = calculate_option_metrics(
                    state.inputs, method=self._config.method
                )
            except (ArithmeticError, TypeError, ValueError):
                logger.exception(
                    "calculation_failed", inputs=state.inputs.as_dict()
                )
                self._transition(CalculatorPhase.INVALID, trigger)
                self._last_outcome = CalculatorPhase.INVALID
                self.set_state(result=None)
                return None

            self._transition(CalculatorPhase.COMPUTED, trigger, C0=result.C0, P0=result.P0)
            self._last_outcome = CalculatorPhase.COMPUTED
            self.set_state(result=result)
            return result
        finally:
            self._return_to_idle(trigger)

    def on_input_changed(self, field: str, value: Any) -> PricingResult | None:
        """Handle one input change: validate, commit, then compute or skip.

        ``value`` may be a raw UI value (e.g. a string); see :func:`parse_input`.

        Raises
        ------
        UnknownFieldError
            If ``field`` is not one of the five inputs.
        """
        name = canonical_field(field)
        if name not in FIELDS:
            raise UnknownFieldError(field, FIELDS)

        number = parse_input(value)
        try:
            self._transition(CalculatorPhase.VALIDATING, name, value=number)
            candidate = dataclasses.replace(self._state.inputs, **{name: number})
            errors = validate_all(candidate)

            # committed without notifying: update_calculations() emits the
            # single notification of this cycle
            self._state = self._merge({name: number, "errors": errors, "result": None})
            return self.update_calculations()
        finally:
            self._return_to_idle(name)
