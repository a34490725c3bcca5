"""
Tagged outcome of a provider status code.

Providers map their status strings onto a StatusOutcome; callers branch on
`kind` (or call `raise_for_status()`) before building a Location.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from geocode_adapter.geocoding.base import (
    GeocodingError,
    AddressNotFoundError,
    CredentialsError,
    UnknownProviderError,
)


class StatusKind(str, Enum):
    """Classified provider status."""
    SUCCESS = "success"
    ADDRESS_NOT_FOUND = "address_not_found"
    CREDENTIALS = "credentials"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class StatusOutcome:
    """Result of classifying a provider status code."""

    kind: StatusKind
    status: str
    message: str = ""
    provider: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is StatusKind.SUCCESS

    def to_error(self, address: str = "") -> Optional[GeocodingError]:
        """Build the exception matching this outcome, or None on success."""
        if self.kind is StatusKind.SUCCESS:
            return None
        if self.kind is StatusKind.ADDRESS_NOT_FOUND:
            return AddressNotFoundError(self.message, provider=self.provider, address=address)
        if self.kind is StatusKind.CREDENTIALS:
            return CredentialsError(self.message, provider=self.provider, address=address)
        return UnknownProviderError(self.status, provider=self.provider, address=address)

    def raise_for_status(self, address: str = "") -> None:
        """Raise the matching GeocodingError unless the status is a success."""
        error = self.to_error(address)
        if error is not None:
            raise error
