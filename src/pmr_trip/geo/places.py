"""Coordinates for the place labels used when booking taxi legs."""

import logging
import unicodedata

from .models import GeoPoint

logger = logging.getLogger(__name__)

KNOWN_PLACES: dict[str, GeoPoint] = {
    "Paris, Champs-Élysées": GeoPoint.of(48.8698, 2.3078),
    "Paris Gare de Lyon": GeoPoint.of(48.8447, 2.3736),
    "Marseille Saint-Charles": GeoPoint.of(43.3028, 5.3806),
    "Marseille, Stade Vélodrome": GeoPoint.of(43.2699, 5.3958),
}

# Paris centre
DEFAULT_ORIGIN = GeoPoint.of(48.8566, 2.3522)
DEFAULT_DESTINATION = GeoPoint.of(48.8747, 2.3464)


def _normalize(label: str) -> str:
    decomposed = unicodedata.normalize("NFKD", label)
    ascii_only = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(ascii_only.replace(",", " ").replace("-", " ").lower().split())


_INDEX = {_normalize(name): point for name, point in KNOWN_PLACES.items()}


def lookup_place(label: str | None) -> GeoPoint | None:
    """Find a known place, ignoring case and accents."""
    if not label:
        return None
    return _INDEX.get(_normalize(label))


def resolve_route(
    origin_label: str | None, destination_label: str | None
) -> tuple[GeoPoint, GeoPoint]:
    """Resolve both ends of a taxi leg, falling back to central Paris points."""
    origin = lookup_place(origin_label)
    if origin is None:
        logger.debug(f"Unknown origin {origin_label!r}, using default origin")
        origin = DEFAULT_ORIGIN

    destination = lookup_place(destination_label)
    if destination is None:
        logger.debug(f"Unknown destination {destination_label!r}, using default destination")
        destination = DEFAULT_DESTINATION

    return origin, destination
