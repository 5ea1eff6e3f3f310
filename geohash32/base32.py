from .errors import InvalidCharacterError

ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"  # no a, i, l, o
DECODE_MAP = {char: index for index, char in enumerate(ALPHABET)}
BITS_PER_CHAR = 5

_MASK = (1 << BITS_PER_CHAR) - 1


def encode(bits: int, length: int) -> str:
    """Render the low ``length * 5`` bits of ``bits``, most significant group first."""
    result = []
    for i in range(length - 1, -1, -1):
        result.append(ALPHABET[(bits >> (i * BITS_PER_CHAR)) & _MASK])
    return "".join(result)


def decode(geohash: str) -> int:
    """Pack a geohash back into an integer of ``len(geohash) * 5`` bits."""
    value = 0
    for position, char in enumerate(geohash):
        try:
            index = DECODE_MAP[char]
        except KeyError:
            raise InvalidCharacterError(char, position) from None
        value = (value << BITS_PER_CHAR) | index
    return value


def is_valid(geohash: str) -> bool:
    """Check alphabet membership without raising, e.g. before :func:`decode`."""
    return all(char in DECODE_MAP for char in geohash)
