from .distance import EARTH_RADIUS_KM, distance_km, haversine_km, is_within_proximity
from .models import GeoPoint, validate_coordinates
from .places import KNOWN_PLACES, lookup_place, resolve_route
from .viewport import MapBounds

__all__ = [
    "GeoPoint",
    "validate_coordinates",
    "EARTH_RADIUS_KM",
    "haversine_km",
    "distance_km",
    "is_within_proximity",
    "KNOWN_PLACES",
    "lookup_place",
    "resolve_route",
    "MapBounds",
]
