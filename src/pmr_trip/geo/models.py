from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from pmr_trip.core.exceptions import InvalidCoordinateError

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)


def _check_range(field: str, value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    # NaN fails both comparisons
    if not (low <= value <= high):
        raise InvalidCoordinateError(field, value, low, high)
    return value


def validate_coordinates(lat: float, lon: float) -> tuple[float, float]:
    """Raise InvalidCoordinateError unless (lat, lon) is a valid WGS84 pair."""
    return _check_range("latitude", lat, LAT_RANGE), _check_range("longitude", lon, LON_RANGE)


class GeoPoint(BaseModel):
    """Immutable WGS84 position."""

    latitude: float
    longitude: float

    model_config = ConfigDict(frozen=True)

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float) -> float:
        return _check_range("latitude", v, LAT_RANGE)

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float) -> float:
        return _check_range("longitude", v, LON_RANGE)

    @classmethod
    def of(cls, lat: float, lon: float) -> "GeoPoint":
        return cls(latitude=lat, longitude=lon)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GeoPoint":
        """Build from the stored JSON shape {"lat": .., "lng": ..}."""
        return cls(latitude=float(data["lat"]), longitude=float(data["lng"]))

    def to_mapping(self) -> dict[str, float]:
        return {"lat": self.latitude, "lng": self.longitude}

    def as_tuple(self) -> tuple[float, float]:
        return self.latitude, self.longitude
