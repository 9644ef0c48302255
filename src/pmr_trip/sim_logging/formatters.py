"""Log formatters for JSON and human-readable output."""

import json
import logging
from datetime import UTC, datetime

CONTEXT_FIELDS = ("session_id", "reservation_id", "correlation_id")
UNSET = "-"


def bound_context(record: logging.LogRecord) -> dict[str, str]:
    """Context fields carried by the record, skipping unset placeholders."""
    fields = {}
    for field in CONTEXT_FIELDS:
        value = getattr(record, field, None)
        if value is not None and value != UNSET:
            fields[field] = str(value)
    return fields


class JSONFormatter(logging.Formatter):
    """One JSON object per line, stamped with the record's own creation time."""

    def __init__(self, environment: str = "development", service: str = "pmr-trip"):
        super().__init__()
        self.environment = environment
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service,
            "env": self.environment,
            **bound_context(record),
        }

        if record.levelno >= logging.ERROR:
            payload["location"] = f"{record.module}:{record.lineno}"
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)

        return json.dumps(payload, ensure_ascii=False)


class DevFormatter(logging.Formatter):
    """Console format showing the taxi session a line belongs to."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)-8s %(name)s [%(session_id)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "session_id"):
            record.session_id = UNSET
        return super().format(record)
