"""Geohash encoding and decoding with bounding boxes and precision estimates."""
from .base32 import ALPHABET, is_valid
from .config import EngineConfig
from .engine import (
    Geohash,
    cell_size,
    decode,
    decode_with_bounding_box,
    encode,
    precision_meters,
    suggest_length_for_precision,
)
from .errors import (
    GeohashError,
    InvalidCharacterError,
    InvalidCoordinateError,
    InvalidLengthError,
)
from .export import dumps_geojson, to_geojson, to_url
from .models import BoundedHash, BoundingBox, Coordinate, DecodedHash

__all__ = [
    "ALPHABET",
    "BoundedHash",
    "BoundingBox",
    "Coordinate",
    "DecodedHash",
    "EngineConfig",
    "Geohash",
    "GeohashError",
    "InvalidCharacterError",
    "InvalidCoordinateError",
    "InvalidLengthError",
    "cell_size",
    "decode",
    "decode_with_bounding_box",
    "dumps_geojson",
    "encode",
    "is_valid",
    "precision_meters",
    "suggest_length_for_precision",
    "to_geojson",
    "to_url",
]
