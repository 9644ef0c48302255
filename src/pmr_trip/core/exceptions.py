"""Error taxonomy for the trip-cost and taxi-simulation core.

Every error here is local and synchronous. None of them subclasses
ValueError, so they leave pydantic model construction unwrapped. Nothing in
the core performs I/O, so there is nothing to retry; callers translate these
into user messages.
"""


class PMRCoreError(Exception):
    """Base class for all errors raised by the core."""


class InvalidArgumentError(PMRCoreError):
    """Malformed or out-of-range input (tick counts, leg counts, ...)."""


class InvalidCoordinateError(InvalidArgumentError):
    """Latitude or longitude outside its valid domain."""

    def __init__(self, field: str, value: float, low: float, high: float):
        self.field = field
        self.value = value
        super().__init__(f"{field} {value} outside valid range [{low}, {high}]")


class SessionStateError(PMRCoreError):
    """Operation not allowed for the session's current status."""


class SessionTerminatedError(SessionStateError):
    """The taxi has already arrived; the session accepts no more ticks."""
