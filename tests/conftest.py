"""
Pytest configuration and fixtures.
"""
import json
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def component(long_name, *types, short_name=None):
    return {
        "long_name": long_name,
        "short_name": short_name or long_name,
        "types": list(types),
    }


@pytest.fixture
def amphitheatre_payload():
    """Geocoding API response for 1600 Amphitheatre Pkwy."""
    return {
        "status": "OK",
        "results": [
            {
                "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
                "place_id": "ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
                "types": ["street_address"],
                "geometry": {
                    "location": {"lat": 37.423111, "lng": -122.081783},
                    "location_type": "ROOFTOP",
                },
                "address_components": [
                    component("1600", "street_number"),
                    component("Amphitheatre Pkwy", "route"),
                    component("Mountain View", "locality", "political"),
                    component("Santa Clara County", "administrative_area_level_2", "political"),
                    component("California", "administrative_area_level_1", "political", short_name="CA"),
                    component("United States", "country", "political", short_name="US"),
                    component("94043", "postal_code"),
                ],
            }
        ],
    }


@pytest.fixture
def amphitheatre_json(amphitheatre_payload):
    return json.dumps(amphitheatre_payload)


@pytest.fixture
def make_payload():
    """Build a JSON payload from a status and optional results."""
    def _make(status="OK", results=None, **extra):
        data = {"status": status, "results": results or []}
        data.update(extra)
        return json.dumps(data)
    return _make
