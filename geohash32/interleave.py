"""Bit interleaving for geohashes.

Longitude always occupies the even positions (counting from the most
significant bit) and latitude the odd ones. When the total is odd the
longitude stream is one bit longer and supplies the final bit alone.
"""


def split_budget(total_bits: int) -> tuple[int, int]:
    """Return ``(lng_bits, lat_bits)`` for a hash of ``total_bits`` bits."""
    lat_bits = total_bits // 2
    return total_bits - lat_bits, lat_bits


def interleave(lng_value: int, lat_value: int, lng_bits: int, lat_bits: int) -> int:
    if not 0 <= lng_bits - lat_bits <= 1:
        raise ValueError(
            f"Longitude stream ({lng_bits} bits) must match or exceed the "
            f"latitude stream ({lat_bits} bits) by at most one bit"
        )

    result = 0
    for i in range(lng_bits):
        result = (result << 1) | ((lng_value >> (lng_bits - 1 - i)) & 1)
        if i < lat_bits:
            result = (result << 1) | ((lat_value >> (lat_bits - 1 - i)) & 1)
    return result


def deinterleave(value: int, total_bits: int) -> tuple[int, int]:
    """Split an interleaved value back into ``(lng_value, lat_value)``."""
    lng_value = lat_value = 0
    for i in range(total_bits):
        bit = (value >> (total_bits - 1 - i)) & 1
        if i % 2 == 0:
            lng_value = (lng_value << 1) | bit
        else:
            lat_value = (lat_value << 1) | bit
    return lng_value, lat_value
