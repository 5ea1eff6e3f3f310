import pytest
from hypothesis import given, strategies as st

from geohash32 import bisector


def test_midpoint_goes_to_upper_half():
    assert bisector.encode(0.0, -90.0, 90.0, 1) == 1
    assert bisector.encode(45.0, -90.0, 90.0, 2) == 0b11


def test_lower_half():
    assert bisector.encode(-0.5, -90.0, 90.0, 3) == 0b011


def test_zero_bits_returns_full_range():
    assert bisector.encode(12.5, -90.0, 90.0, 0) == 0
    assert bisector.decode(0, 0, -90.0, 90.0) == (-90.0, 90.0)


def test_decode_narrows_interval():
    assert bisector.decode(0b10, 2, -180.0, 180.0) == (0.0, 90.0)
    assert bisector.decode(0b01, 2, -180.0, 180.0) == (-90.0, 0.0)


def test_range_ends():
    assert bisector.encode(90.0, -90.0, 90.0, 4) == 0b1111
    assert bisector.encode(-90.0, -90.0, 90.0, 4) == 0


@given(st.floats(-180, 180), st.integers(0, 40))
def test_decoded_interval_contains_value(value, bit_count):
    bits = bisector.encode(value, -180.0, 180.0, bit_count)
    lo, hi = bisector.decode(bits, bit_count, -180.0, 180.0)
    assert lo <= value <= hi
    assert hi - lo == 360.0 / (1 << bit_count)


def test_out_of_range_value_is_rejected():
    with pytest.raises(ValueError, match="between"):
        bisector.encode(91.0, -90.0, 90.0, 5)
