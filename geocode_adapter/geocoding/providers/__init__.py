"""
Geocoding provider implementations.
"""

from geocode_adapter.geocoding.providers.google import GoogleGeocoder

__all__ = ["GoogleGeocoder"]
