from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class BoundingBox:
    """Rectangle spanned by a geohash cell, southwest to northeast corner."""

    sw: Coordinate
    ne: Coordinate

    @property
    def lat_span(self) -> float:
        return self.ne.lat - self.sw.lat

    @property
    def lng_span(self) -> float:
        return self.ne.lng - self.sw.lng

    @property
    def area(self) -> float:
        """Area in square degrees."""
        return self.lat_span * self.lng_span

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            lat=(self.sw.lat + self.ne.lat) / 2, lng=(self.sw.lng + self.ne.lng) / 2
        )

    def contains(self, point: Coordinate) -> bool:
        return (
            self.sw.lat <= point.lat <= self.ne.lat
            and self.sw.lng <= point.lng <= self.ne.lng
        )

    def to_bbox(self) -> tuple[float, float, float, float]:
        """Return ``(west, south, east, north)``, the order GIS libraries expect."""
        return self.sw.lng, self.sw.lat, self.ne.lng, self.ne.lat

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {"sw": self.sw.to_dict(), "ne": self.ne.to_dict()}


@dataclass(frozen=True)
class DecodedHash:
    """Decoded geohash cell.

    Attributes:
        lat: Centre latitude, rounded to 6 decimal places
        lng: Centre longitude, rounded to 6 decimal places
        bbox: Exact cell bounds, unrounded
        hash: The geohash that was decoded
    """

    lat: float
    lng: float
    bbox: BoundingBox
    hash: str

    @property
    def center(self) -> Coordinate:
        """Unrounded cell centre."""
        return self.bbox.center

    @property
    def point(self) -> Coordinate:
        return Coordinate(lat=self.lat, lng=self.lng)

    def to_dict(self) -> dict[str, Any]:
        return {"lat": self.lat, "lng": self.lng, "bbox": self.bbox.to_dict()}


@dataclass(frozen=True)
class BoundedHash(DecodedHash):
    """Decoded cell with a bounding box derived from the precision formula."""

    precision_m: float

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["precision_m"] = self.precision_m
        return data
