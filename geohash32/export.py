"""Presentation helpers around decoded geohashes: share URLs and GeoJSON."""
import json
import math
from typing import Any

from shapely.geometry import Point, Polygon, mapping

from .engine import METERS_PER_DEGREE
from .models import BoundedHash

URL_PATH_SEGMENT = "/h/"


def to_url(geohash: str, base: str = "") -> str:
    return base.rstrip("/") + URL_PATH_SEGMENT + geohash


def _padding_degrees(padding_meters: float, lat: float) -> tuple[float, float]:
    # Longitude degrees shrink with latitude, unlike precision_meters' flat estimate.
    lat_pad = padding_meters / METERS_PER_DEGREE
    lng_pad = padding_meters / (METERS_PER_DEGREE * math.cos(math.radians(lat)))
    return lat_pad, lng_pad


def to_geojson(
    decoded: BoundedHash, include_center: bool = True, padding_meters: float = 0.0
) -> dict[str, Any]:
    """Build a GeoJSON FeatureCollection for a decoded geohash.

    Args:
        decoded: Result of ``decode_with_bounding_box``
        include_center: Also emit a Point feature at the cell centre
        padding_meters: Grow the box by this many meters on every side

    Returns:
        FeatureCollection dict with a Polygon feature and an optional Point
    """
    west, south, east, north = decoded.bbox.to_bbox()
    if padding_meters > 0:
        lat_pad, lng_pad = _padding_degrees(padding_meters, decoded.lat)
        west, east = west - lng_pad, east + lng_pad
        south, north = south - lat_pad, north + lat_pad

    cell = Polygon([(west, south), (east, south), (east, north), (west, north)])
    features = [
        {
            "type": "Feature",
            "properties": {"type": "bbox", "hash": decoded.hash},
            "geometry": mapping(cell),
        }
    ]

    if include_center:
        features.append(
            {
                "type": "Feature",
                "properties": {"type": "center", "hash": decoded.hash},
                "geometry": mapping(Point(decoded.lng, decoded.lat)),
            }
        )

    return {"type": "FeatureCollection", "features": features}


def dumps_geojson(
    decoded: BoundedHash, include_center: bool = True, padding_meters: float = 0.0
) -> str:
    return json.dumps(
        to_geojson(decoded, include_center=include_center, padding_meters=padding_meters),
        indent=4,
    )
