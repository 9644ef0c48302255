"""Core utilities shared by the billing and taxi modules."""

from .exceptions import (
    InvalidArgumentError,
    InvalidCoordinateError,
    PMRCoreError,
    SessionStateError,
    SessionTerminatedError,
)

__all__ = [
    "PMRCoreError",
    "InvalidArgumentError",
    "InvalidCoordinateError",
    "SessionStateError",
    "SessionTerminatedError",
]
