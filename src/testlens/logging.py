"""Structured logging configuration for testlens."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

import structlog

if TYPE_CHECKING:
    from structlog.typing import EventDict, WrappedLogger


def drop_empty_fields(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Remove keys whose value is None so optional fields stay out of the log."""
    return {key: value for key, value in event_dict.items() if value is not None}


def configure_logging(
    log_level: str = "INFO",
    json_format: bool = True,
    stream: TextIO | None = None,
) -> None:
    """
    Configure structured logging with structlog.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output JSON format; otherwise, console format.
        stream: Output stream (defaults to sys.stderr).
    """
    if stream is None:
        stream = sys.stderr

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        drop_empty_fields,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,  # Disable caching for tests
    )


def configure_default_logging() -> None:
    """Send warnings and errors to stderr unless structlog is already configured.

    Without this, structlog's own defaults print every debug event to stdout,
    which tools embedding testlens may use for their own output.
    """
    if not structlog.is_configured():
        configure_logging(log_level="WARNING", json_format=False)


def get_logger(name: str) -> Any:
    """
    Get a configured logger instance.

    The logger is resolved lazily on every call, so module-level loggers
    pick up a configuration applied after import.

    Args:
        name: Logger name (typically module name).

    Returns:
        Lazy structlog logger proxy.
    """
    return structlog.get_logger(name, logger_name=name)


configure_default_logging()
