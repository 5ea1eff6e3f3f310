import argparse
import logging

from .engine import Geohash
from .export import dumps_geojson, to_url


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="geohash32", description="Encode a coordinate and describe its cell."
    )
    parser.add_argument("lat", type=float)
    parser.add_argument("lng", type=float)
    parser.add_argument("--length", type=int, default=None, help="hash length (1-12)")
    parser.add_argument("--base-url", default=None)
    parser.add_argument("--geojson", action="store_true")
    parser.add_argument("--padding", type=float, default=0.0, help="GeoJSON padding in meters")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    geo = Geohash()
    if args.length is not None:
        geo = geo.with_hash_length(args.length)

    encoded = geo.encode(args.lat, args.lng)
    decoded = geo.decode_with_bounding_box(encoded)
    sw, ne = decoded.bbox.sw, decoded.bbox.ne

    print(f"Encoded: {encoded}")
    print(f"Decoded: {decoded.lat}, {decoded.lng}")
    print(f"Bounding box: SW({sw.lat}, {sw.lng}) to NE({ne.lat}, {ne.lng})")
    print(f"Precision: {decoded.precision_m:.2f} m")
    if args.base_url is not None:
        print(f"URL: {to_url(encoded, args.base_url)}")
    if args.geojson:
        print(dumps_geojson(decoded, padding_meters=args.padding))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
