"""Logging setup and configuration."""

import logging
import sys
from typing import TextIO

from .context import ContextFilter
from .filters import DefaultContextFilter, PIIFilter
from .formatters import DevFormatter, JSONFormatter

# Third-party loggers that are only useful when debugging them
QUIET_LOGGERS = ("faker", "faker.factory")

_HANDLER_MARKER = "_pmr_trip_handler"


def build_handler(
    json_output: bool = False,
    environment: str = "development",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Stream handler with the project's formatter and filter chain.

    Context is bound before defaults are filled, so a field set through
    log_context() is never replaced by the placeholder.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter(environment) if json_output else DevFormatter())
    for log_filter in (PIIFilter(), ContextFilter(), DefaultContextFilter()):
        handler.addFilter(log_filter)
    setattr(handler, _HANDLER_MARKER, True)
    return handler


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    environment: str = "development",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install the project handler on the root logger.

    Calling it again swaps the previous project handler; handlers installed
    by others (test capture, host application) are left in place.
    """
    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            root_logger.removeHandler(existing)

    handler = build_handler(json_output, environment, stream)
    root_logger.addHandler(handler)
    root_logger.setLevel(level.upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler


def setup_logging_from_settings(settings, stream: TextIO | None = None) -> logging.Handler:
    """Configure logging from a LoggingSettings instance."""
    return setup_logging(
        level=settings.level,
        json_output=settings.format == "json",
        environment=settings.environment,
        stream=stream,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)
