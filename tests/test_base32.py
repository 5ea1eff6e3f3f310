import pytest

from geohash32 import base32
from geohash32.errors import GeohashError, InvalidCharacterError


def test_alphabet_excludes_ambiguous_letters():
    assert len(base32.ALPHABET) == 32
    assert len(set(base32.ALPHABET)) == 32
    for letter in "ailo":
        assert letter not in base32.ALPHABET


def test_encode_most_significant_group_first():
    assert base32.encode(0b00001_11111, 2) == "1z"
    assert base32.encode(0, 3) == "000"


def test_decode_packs_five_bits_per_character():
    assert base32.decode("1z") == 0b00001_11111
    assert base32.decode("zzzzzzzzzzzz") == (1 << 60) - 1
    assert base32.decode("") == 0


def test_every_symbol_maps_to_its_index():
    for index, char in enumerate(base32.ALPHABET):
        assert base32.decode(char) == index
        assert base32.encode(index, 1) == char


def test_decode_rejects_unknown_character():
    with pytest.raises(InvalidCharacterError) as excinfo:
        base32.decode("u4a")
    assert excinfo.value.character == "a"
    assert excinfo.value.position == 2
    assert isinstance(excinfo.value, GeohashError)
    assert isinstance(excinfo.value, ValueError)


def test_decode_is_case_sensitive():
    with pytest.raises(InvalidCharacterError):
        base32.decode("U4PRUYD")


def test_is_valid():
    assert base32.is_valid("u4pruydqqvj")
    assert base32.is_valid("")
    assert not base32.is_valid("invalid@hash")


def test_is_valid_is_exported():
    from geohash32 import is_valid

    assert is_valid("ezs42")
    assert not is_valid("EZS42")
