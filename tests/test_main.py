import json

from geohash32 import encode
from geohash32.__main__ import main


def test_prints_hash_and_cell(capsys):
    assert main(["1.3521", "103.8198", "--length", "7"]) == 0
    out = capsys.readouterr().out
    assert f"Encoded: {encode(1.3521, 103.8198, 7)}" in out
    assert "Bounding box: SW(" in out
    assert "Precision:" in out


def test_negative_coordinates_and_url(capsys):
    main(["-33.8688", "151.2093", "--base-url", "https://maps.example.com"])
    out = capsys.readouterr().out
    assert f"URL: https://maps.example.com/h/{encode(-33.8688, 151.2093, 5)}" in out


def test_length_is_clamped(capsys):
    main(["0", "0", "--length", "20"])
    out = capsys.readouterr().out
    assert f"Encoded: {encode(0, 0, 12)}\n" in out


def test_geojson_output(capsys):
    main(["40.7589", "-73.9851", "--geojson"])
    out = capsys.readouterr().out
    document = out[out.index("{"):]
    assert json.loads(document)["type"] == "FeatureCollection"
