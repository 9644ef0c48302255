from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, model_validator

from pmr_trip.core.exceptions import InvalidArgumentError

from .models import GeoPoint


class MapBounds(BaseModel):
    """Rectangular map area used to place markers on a schematic map."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_order(self) -> "MapBounds":
        if self.min_lat > self.max_lat or self.min_lng > self.max_lng:
            raise ValueError("Bounds minimum must not exceed maximum")
        return self

    @classmethod
    def around(
        cls,
        points: Iterable[GeoPoint],
        margin_ratio: float = 0.1,
        padding_deg: float = 0.0,
    ) -> "MapBounds":
        """Bounding box of points, widened by a share of its span plus fixed padding.

        The taxi map uses a 10% margin, the agent map a flat 0.01 degree padding.
        """
        points = list(points)
        if not points:
            raise InvalidArgumentError("At least one point is required to compute bounds")
        if margin_ratio < 0 or padding_deg < 0:
            raise InvalidArgumentError("Margin and padding must be non-negative")

        lats = [p.latitude for p in points]
        lngs = [p.longitude for p in points]
        min_lat, max_lat = min(lats), max(lats)
        min_lng, max_lng = min(lngs), max(lngs)

        margin_lat = (max_lat - min_lat) * margin_ratio + padding_deg
        margin_lng = (max_lng - min_lng) * margin_ratio + padding_deg

        return cls(
            min_lat=min_lat - margin_lat,
            max_lat=max_lat + margin_lat,
            min_lng=min_lng - margin_lng,
            max_lng=max_lng + margin_lng,
        )

    def project(self, point: GeoPoint) -> tuple[float, float]:
        """Convert a GPS point to (x, y) percentages; y grows southwards."""
        x = _scale(point.longitude - self.min_lng, self.max_lng - self.min_lng)
        y = _scale(self.max_lat - point.latitude, self.max_lat - self.min_lat)
        return x, y


def _scale(offset: float, span: float) -> float:
    if span == 0:
        return 50.0
    return max(0.0, min(100.0, offset / span * 100))
