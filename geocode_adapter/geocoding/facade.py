"""
Geocoding facade providing a simple interface to the providers.
"""

import logging
from typing import Literal, Optional

from geocode_adapter.geocoding.base import BaseGeocoder, Location
from geocode_adapter.geocoding.providers.google import GoogleGeocoder

logger = logging.getLogger(__name__)

ProviderType = Literal["google"]


def get_geocoder(provider: ProviderType = "google", **kwargs) -> BaseGeocoder:
    """
    Get a geocoder instance by provider name.

    Args:
        provider: Provider name ("google")
        **kwargs: Passed to the provider constructor

    Returns:
        Geocoder instance
    """
    providers = {
        "google": GoogleGeocoder,
    }

    if provider not in providers:
        raise ValueError(f"Unknown provider: {provider}. Choose from: {list(providers.keys())}")

    return providers[provider](**kwargs)


def locate_address(
    address: str,
    provider: ProviderType = "google",
    api_key: Optional[str] = None,
) -> Location:
    """
    Geocode a single free-text address.

    Errors from the provider propagate unchanged; there is no retry or
    fallback here.

    Example:
        location = locate_address("1600 Amphitheatre Pkwy, Mountain View, CA")
    """
    with get_geocoder(provider, api_key=api_key) as geocoder:
        location = geocoder.locate(address)
    logger.info(
        f"Located {address} at {location.latitude:.6f}, {location.longitude:.6f} "
        f"({location.precision.label})"
    )
    return location
