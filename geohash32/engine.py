import logging
import math
from typing import Optional

from . import base32, bisector, interleave
from .config import MAX_HASH_LENGTH, MIN_HASH_LENGTH, EngineConfig
from .errors import InvalidCoordinateError, InvalidLengthError
from .models import BoundedHash, BoundingBox, Coordinate, DecodedHash

logger = logging.getLogger(__name__)

LAT_RANGE = (-90.0, 90.0)
LNG_RANGE = (-180.0, 180.0)
METERS_PER_DEGREE = 111_320  # at the equator
DECIMAL_PLACES = 6


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


class Geohash:
    """Geohash encoder/decoder.

    Instances are immutable: the default hash length lives in a frozen
    :class:`EngineConfig`, and :meth:`with_hash_length` returns a new engine.
    Pass ``length`` to :meth:`encode` explicitly when sharing an engine.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self._config = config or EngineConfig()

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def hash_length(self) -> int:
        return self._config.hash_length

    def with_hash_length(self, length: int) -> "Geohash":
        """Return an engine whose default length is ``length`` clamped into [1, 12]."""
        return Geohash(self._config.replace(hash_length=length))

    def encode(self, lat: float, lng: float, length: Optional[int] = None) -> str:
        """Encode a latitude and longitude into a geohash.

        Out-of-range coordinates are clamped rather than rejected, but NaN raises
        :class:`InvalidCoordinateError`. An explicit ``length`` is used as is;
        only the configured default is capped at 12.
        """
        if length is None:
            length = self._config.hash_length
        if length < 0:
            raise InvalidLengthError(f"Hash length must not be negative, got {length}")
        if math.isnan(lat) or math.isnan(lng):
            raise InvalidCoordinateError(f"Coordinates must be numbers, got ({lat}, {lng})")

        clamped_lat = clamp(lat, *LAT_RANGE)
        clamped_lng = clamp(lng, *LNG_RANGE)
        if (clamped_lat, clamped_lng) != (lat, lng):
            logger.debug(
                "Clamped (%s, %s) to (%s, %s)", lat, lng, clamped_lat, clamped_lng
            )

        total_bits = length * base32.BITS_PER_CHAR
        lng_bits, lat_bits = interleave.split_budget(total_bits)

        lat_stream = bisector.encode(clamped_lat, *LAT_RANGE, lat_bits)
        lng_stream = bisector.encode(clamped_lng, *LNG_RANGE, lng_bits)

        bits = interleave.interleave(lng_stream, lat_stream, lng_bits, lat_bits)
        return base32.encode(bits, length)

    def _cell_bounds(self, geohash: str) -> BoundingBox:
        total_bits = len(geohash) * base32.BITS_PER_CHAR
        lng_bits, lat_bits = interleave.split_budget(total_bits)

        value = base32.decode(geohash)
        lng_stream, lat_stream = interleave.deinterleave(value, total_bits)

        lat_lo, lat_hi = bisector.decode(lat_stream, lat_bits, *LAT_RANGE)
        lng_lo, lng_hi = bisector.decode(lng_stream, lng_bits, *LNG_RANGE)
        return BoundingBox(
            sw=Coordinate(lat=lat_lo, lng=lng_lo), ne=Coordinate(lat=lat_hi, lng=lng_hi)
        )

    def decode(self, geohash: str) -> DecodedHash:
        """Decode a geohash into its rounded centre and exact bounding box.

        Raises:
            InvalidCharacterError: If the geohash has a character outside the alphabet
        """
        bbox = self._cell_bounds(geohash)
        center = bbox.center
        # Rounding may overshoot cells narrower than 1e-6 degrees.
        lat = clamp(round(center.lat, DECIMAL_PLACES), bbox.sw.lat, bbox.ne.lat)
        lng = clamp(round(center.lng, DECIMAL_PLACES), bbox.sw.lng, bbox.ne.lng)
        logger.debug("Decoded %r to (%s, %s)", geohash, lat, lng)
        return DecodedHash(lat=lat, lng=lng, bbox=bbox, hash=geohash)

    def cell_size(self, length: int) -> tuple[float, float]:
        """Calculate the size of a geohash cell for a given length.

        Args:
            length (int): number of characters in the geohash

        Returns:
            (latitude_degrees, longitude_degrees) of the full cell
        """
        lng_bits, lat_bits = interleave.split_budget(length * base32.BITS_PER_CHAR)

        # ldexp underflows to 0.0 for very long hashes instead of overflowing.
        lat_err = math.ldexp(LAT_RANGE[1] - LAT_RANGE[0], -lat_bits)
        lng_err = math.ldexp(LNG_RANGE[1] - LNG_RANGE[0], -lng_bits)

        return lat_err, lng_err

    def precision_meters(self, length: int) -> float:
        """Worst-case positional error in meters for a hash of ``length`` characters.

        Both axes use the equatorial 111320 m/degree, so longitude error is an
        upper bound everywhere off the equator.
        """
        lat_err, lng_err = self.cell_size(length)
        return max(lat_err * METERS_PER_DEGREE, lng_err * METERS_PER_DEGREE)

    def suggest_length_for_precision(self, target_meters: float) -> int:
        """Shortest length in [1, 12] meeting ``target_meters``; 12 if none does."""
        for length in range(MIN_HASH_LENGTH, MAX_HASH_LENGTH + 1):
            if self.precision_meters(length) <= target_meters:
                return length
        return MAX_HASH_LENGTH

    def decode_with_bounding_box(self, geohash: str) -> BoundedHash:
        """Decode a geohash, deriving its bounds from the cell size formula.

        The resulting box matches ``decode(geohash).bbox``.
        """
        decoded = self.decode(geohash)
        center = decoded.center
        lat_err, lng_err = self.cell_size(len(geohash))

        bbox = BoundingBox(
            sw=Coordinate(lat=center.lat - lat_err / 2, lng=center.lng - lng_err / 2),
            ne=Coordinate(lat=center.lat + lat_err / 2, lng=center.lng + lng_err / 2),
        )
        return BoundedHash(
            lat=decoded.lat,
            lng=decoded.lng,
            bbox=bbox,
            hash=geohash,
            precision_m=self.precision_meters(len(geohash)),
        )


_default_engine = Geohash()

encode = _default_engine.encode
decode = _default_engine.decode
cell_size = _default_engine.cell_size
precision_meters = _default_engine.precision_meters
suggest_length_for_precision = _default_engine.suggest_length_for_precision
decode_with_bounding_box = _default_engine.decode_with_bounding_box
