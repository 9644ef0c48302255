"""Logging module with structured formatters, PII filtering, and context management."""

from .context import ContextFilter, LogContext, log_context, log_session_context
from .filters import DefaultContextFilter, PIIFilter
from .formatters import DevFormatter, JSONFormatter
from .setup import get_logger, setup_logging, setup_logging_from_settings

__all__ = [
    "setup_logging",
    "setup_logging_from_settings",
    "get_logger",
    "log_context",
    "log_session_context",
    "JSONFormatter",
    "DevFormatter",
    "PIIFilter",
    "DefaultContextFilter",
    "LogContext",
    "ContextFilter",
]
