"""Context-local log fields for tracking and billing workflows."""

import contextlib
import logging
from collections.abc import Iterator
from contextvars import ContextVar
from typing import Any

_log_context: ContextVar[dict[str, Any] | None] = ContextVar("pmr_log_context", default=None)


class LogContext:
    """Read access to the fields bound by log_context()."""

    @staticmethod
    def current() -> dict[str, Any]:
        return dict(_log_context.get() or {})

    @staticmethod
    def get(field: str, default: Any = None) -> Any:
        return (_log_context.get() or {}).get(field, default)


@contextlib.contextmanager
def log_context(**fields: Any) -> Iterator[dict[str, Any]]:
    """Bind fields to every record logged inside the block.

    Nested blocks inherit outer fields and may override them.
    """
    merged = {**LogContext.current(), **fields}
    token = _log_context.set(merged)
    try:
        yield merged
    finally:
        _log_context.reset(token)


def log_session_context(session_id: str, reservation_id: str | None = None):
    """Shortcut for the fields used by the taxi tracking workflow."""
    fields: dict[str, Any] = {"session_id": session_id}
    if reservation_id is not None:
        fields["reservation_id"] = reservation_id
    return log_context(**fields)


class ContextFilter(logging.Filter):
    """Copies bound context fields onto each record without clobbering extra={}."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field, value in LogContext.current().items():
            if not hasattr(record, field):
                setattr(record, field, value)
        return True
