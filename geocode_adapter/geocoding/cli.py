#!/usr/bin/env python3
"""
Command-line interface for the geocoding module.

Usage:
    python -m geocode_adapter.geocoding.cli --address "1600 Amphitheatre Pkwy, Mountain View, CA"
    python -m geocode_adapter.geocoding.cli --response-file response.json
    python -m geocode_adapter.geocoding.cli --address "..." --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from geocode_adapter.core import settings
from geocode_adapter.geocoding.base import GeocodingError, Location
from geocode_adapter.geocoding.facade import get_geocoder

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )


def print_location(location: Location, as_json: bool = False) -> None:
    """Print a location either as a summary or as JSON."""
    if as_json:
        print(json.dumps(location.as_dict, indent=2))
        return

    print("✓ Success!")
    print(f"  Latitude:    {location.latitude:.6f}")
    print(f"  Longitude:   {location.longitude:.6f}")
    print(f"  Street:      {location.street or '-'}")
    print(f"  Locality:    {location.locality or '-'}")
    print(f"  Region:      {location.region or '-'}")
    print(f"  Postal code: {location.postal_code or '-'}")
    print(f"  Country:     {location.country or '-'}")
    print(f"  Precision:   {location.precision.label}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Geocode an address with the Google Geocoding API"
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--address", "-a",
        type=str,
        help="Geocode a single address"
    )
    source.add_argument(
        "--response-file", "-f",
        type=Path,
        help="Interpret a saved Geocoding API JSON response instead of calling the API"
    )
    parser.add_argument(
        "--provider", "-p",
        type=str,
        default="google",
        choices=["google"],
        help="Geocoding provider to use"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the location as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    payload = None
    if args.response_file:
        try:
            payload = args.response_file.read_bytes()
        except OSError as e:
            parser.error(f"cannot read {args.response_file}: {e}")

    try:
        with get_geocoder(args.provider) as geocoder:
            if payload is not None:
                location = geocoder.interpret(payload)
            else:
                location = geocoder.locate(args.address)
    except GeocodingError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    print_location(location, as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
