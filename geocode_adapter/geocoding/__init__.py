"""
Geocoding module: interprets provider responses into normalized locations.

Usage:
    from geocode_adapter.geocoding import GoogleGeocoder, locate_address

    # Using the provider directly
    geocoder = GoogleGeocoder()
    location = geocoder.locate("1600 Amphitheatre Pkwy, Mountain View, CA")

    # Using convenience function
    location = locate_address("1600 Amphitheatre Pkwy, Mountain View, CA")
"""

from geocode_adapter.geocoding.base import (
    Location,
    GeocodingError,
    MalformedResponseError,
    AddressNotFoundError,
    CredentialsError,
    UnknownProviderError,
    BaseGeocoder,
)
from geocode_adapter.geocoding.precision import Precision
from geocode_adapter.geocoding.status import StatusKind, StatusOutcome
from geocode_adapter.geocoding.providers.google import GoogleGeocoder
from geocode_adapter.geocoding.facade import get_geocoder, locate_address

__all__ = [
    # Records
    "Location",
    "Precision",
    "StatusKind",
    "StatusOutcome",
    # Errors
    "GeocodingError",
    "MalformedResponseError",
    "AddressNotFoundError",
    "CredentialsError",
    "UnknownProviderError",
    # Base classes
    "BaseGeocoder",
    # Providers
    "GoogleGeocoder",
    # Convenience functions
    "get_geocoder",
    "locate_address",
]
