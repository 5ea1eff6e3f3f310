"""Online binary subdivision of a closed range, one bit per halving."""


def midpoint(lo: float, hi: float) -> float:
    return (lo + hi) / 2


def encode(value: float, lo: float, hi: float, bit_count: int) -> int:
    """Encodes a value into ``bit_count`` bits, most significant first.

    Bit ``i`` is set when the value lies in the upper half of the interval left
    after ``i`` halvings. A value sitting exactly on a midpoint goes up.
    """
    if not lo <= value <= hi:
        raise ValueError(f"Value {value} must be between {lo} and {hi}")

    bits = 0
    for _ in range(bit_count):
        mid = midpoint(lo, hi)
        if value >= mid:
            lo = mid
            bits = (bits << 1) | 1
        else:
            hi = mid
            bits <<= 1
    return bits


def decode(bits: int, bit_count: int, lo: float, hi: float) -> tuple[float, float]:
    """Walks the same halvings as :func:`encode` and returns the final interval."""
    for i in range(bit_count):
        mid = midpoint(lo, hi)
        if (bits >> (bit_count - 1 - i)) & 1:
            lo = mid
        else:
            hi = mid
    return lo, hi
