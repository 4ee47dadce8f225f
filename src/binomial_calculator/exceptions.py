class UnknownFieldError(KeyError):
    """Raised when a field or state key outside the calculator's schema is used.

    Validation failures on *known* fields never raise; they are reported in the
    ``ValidationErrors`` mapping returned by
    :func:`~binomial_calculator.validation.validate_all`. This error is reserved
    for programming mistakes such as a misspelled field passed to
    :meth:`~binomial_calculator.state.ReactiveStore.set_state` or
    :meth:`~binomial_calculator.state.ReactiveStore.on_input_changed`.

    Notes
    -----
    Subclasses :class:`KeyError` so that callers treating the store like a
    mapping can catch it the usual way.
    """

    def __init__(self, key: str, allowed: tuple[str, ...] = ()) -> None:
        self.key = key
        self.allowed = allowed
        msg = f"Unknown field: {key!r}"
        if allowed:
            msg += f" (expected one of {', '.join(allowed)})"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
