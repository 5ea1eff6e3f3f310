class GeohashError(Exception):
    """Base exception for geohash operations."""


class InvalidCharacterError(GeohashError, ValueError):
    """Raised when a geohash contains a character outside the base32 alphabet."""

    def __init__(self, character: str, position: int):
        super().__init__(
            f"Invalid geohash character {character!r} at position {position}. "
            "Use 0-9, b-h, j, k, m, n, p-z."
        )
        self.character = character
        self.position = position


class InvalidLengthError(GeohashError, ValueError):
    """Raised when an explicit hash length is negative."""


class InvalidCoordinateError(GeohashError, ValueError):
    """Raised when a coordinate is NaN and so cannot be clamped."""
