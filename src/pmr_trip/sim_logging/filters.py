"""Log record filters applied at the handler level."""

import logging
import re

from .formatters import CONTEXT_FIELDS, UNSET

EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
# French numbers as produced for taxi drivers ("06 12 34 56 78") and compact forms
PHONE_PATTERN = re.compile(r"(?<!\d)(?:\+33\s?|0)[1-9](?:[\s.-]?\d{2}){4}(?!\d)")


class PIIFilter(logging.Filter):
    """Masks e-mail addresses and phone numbers in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            masked = EMAIL_PATTERN.sub("[EMAIL]", record.msg)
            masked = PHONE_PATTERN.sub("[PHONE]", masked)
            record.msg = masked
        return True


class DefaultContextFilter(logging.Filter):
    """Fills every context field left unbound with a placeholder."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in CONTEXT_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, UNSET)
        return True
