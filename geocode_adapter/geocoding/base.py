"""
Base classes and interfaces for geocoding providers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from geocode_adapter.geocoding.precision import Precision


@dataclass(frozen=True)
class Location:
    """Normalized location built from a provider result."""

    latitude: float
    longitude: float
    street: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    precision: Precision = Precision.UNKNOWN

    @property
    def coordinates(self) -> Tuple[float, float]:
        """(latitude, longitude) pair."""
        return self.latitude, self.longitude

    @property
    def as_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "street": self.street,
            "locality": self.locality,
            "region": self.region,
            "postal_code": self.postal_code,
            "country": self.country,
            "precision": self.precision.label,
        }


class GeocodingError(Exception):
    """Exception raised when geocoding fails."""

    def __init__(self, message: str, provider: str = "", address: str = ""):
        self.message = message
        self.provider = provider
        self.address = address
        super().__init__(f"[{provider}] {message}" if provider else message)


class MalformedResponseError(GeocodingError):
    """Provider payload does not have the expected shape."""


class AddressNotFoundError(GeocodingError):
    """Provider found no match for the address."""


class CredentialsError(GeocodingError):
    """
    Provider refused the request: quota exceeded, request denied or an
    invalid request. `reason` tells the three apart.
    """

    def __init__(self, reason: str, provider: str = "", address: str = ""):
        self.reason = reason
        super().__init__(reason, provider=provider, address=address)


class UnknownProviderError(GeocodingError):
    """Provider returned a status code this adapter does not recognize."""

    def __init__(self, code: str, provider: str = "", address: str = ""):
        self.code = code
        super().__init__(f"Unknown error: {code}", provider=provider, address=address)


class BaseGeocoder(ABC):
    """
    Abstract base class for geocoding providers.

    Subclasses must implement:
    - locate(): Geocode a single free-text address
    - interpret(): Interpret an already fetched response payload
    - provider_name: Name of the provider

    Geocoders are context managers; leaving the block calls close().
    """

    def close(self) -> None:
        """Release any resources held by the provider."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the geocoding provider."""
        pass

    @abstractmethod
    def locate(self, address: str) -> Location:
        """
        Geocode a single address.

        Args:
            address: Free-text address to geocode

        Returns:
            Location of the provider's best match

        Raises:
            GeocodingError: (or a subclass) when no location can be produced
        """
        pass

    @abstractmethod
    def interpret(self, payload: Union[str, bytes], address: str = "") -> Location:
        """
        Turn a raw provider response payload into a Location.

        Args:
            payload: Response body as returned by the provider
            address: Address the payload answers, for error context

        Raises:
            GeocodingError: (or a subclass) when no location can be produced
        """
        pass
