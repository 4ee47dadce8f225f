"""
Logging configuration for the binomial calculator.

The library only obtains loggers; it never configures output on import.
Applications embedding the calculator call :func:`configure_logging` once at
startup to choose level and rendering.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, render JSON lines; otherwise console output
        include_timestamp: Add an ISO timestamp to each event
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for calculator phase transitions.

    Args:
        name: Logger name (typically __name__)
    """
    # lazy proxy: picks up configure_logging() called after import
    return structlog.get_logger(name, subsystem="reactive_store")


def log_state_transition(
    logger: FilteringBoundLogger,
    from_phase: str,
    to_phase: str,
    trigger: str,
    context: dict[str, Any] | None = None,
) -> None:
    """
    Log a phase transition of the reactive store at debug level.

    Args:
        logger: Structlog logger instance
        from_phase: Phase before the transition
        to_phase: Phase after the transition
        trigger: What caused it (field name, "update_calculations", ...)
        context: Additional context data
    """
    bound_logger = logger.bind(
        from_phase=from_phase,
        to_phase=to_phase,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("phase_transition")
