"""Great-circle distance helpers."""

from math import asin, cos, radians, sin, sqrt

from pmr_trip.settings import ProximitySettings

from .models import GeoPoint, validate_coordinates

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate distance in km between two coordinates using Haversine formula."""
    validate_coordinates(lat1, lon1)
    validate_coordinates(lat2, lon2)

    lat1_rad = radians(lat1)
    lat2_rad = radians(lat2)
    delta_lat = radians(lat2 - lat1)
    delta_lon = radians(lon2 - lon1)

    a = sin(delta_lat / 2) ** 2 + cos(lat1_rad) * cos(lat2_rad) * sin(delta_lon / 2) ** 2
    # Rounding can push a marginally above 1 for antipodal points
    c = 2 * asin(sqrt(min(1.0, a)))

    return EARTH_RADIUS_KM * c


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def is_within_proximity(
    a: GeoPoint,
    b: GeoPoint,
    radius_m: float | None = None,
    settings: ProximitySettings | None = None,
) -> bool:
    """True when a is close to, but not exactly on, b.

    The radius defaults to ProximitySettings.radius_m (PROXIMITY_RADIUS_M).

    A zero distance means the positions have not diverged yet (the agent
    position is still defaulted), so it never counts as an approach.
    """
    if radius_m is None:
        radius_m = (settings or ProximitySettings()).radius_m

    distance_m = distance_km(a, b) * 1000
    return 0 < distance_m < radius_m
