"""Trip-cost and taxi-simulation core for PMR assistance trips."""

from .billing import InvoiceBreakdown, InvoiceCalculator, TripChargeRequest, compute_invoice
from .core.exceptions import (
    InvalidArgumentError,
    InvalidCoordinateError,
    PMRCoreError,
    SessionStateError,
    SessionTerminatedError,
)
from .geo import GeoPoint, distance_km, haversine_km
from .taxi import SessionStatus, TaxiSimulationSession, TaxiSimulator

__all__ = [
    "TripChargeRequest",
    "InvoiceBreakdown",
    "InvoiceCalculator",
    "compute_invoice",
    "GeoPoint",
    "haversine_km",
    "distance_km",
    "SessionStatus",
    "TaxiSimulationSession",
    "TaxiSimulator",
    "PMRCoreError",
    "InvalidArgumentError",
    "InvalidCoordinateError",
    "SessionStateError",
    "SessionTerminatedError",
]
