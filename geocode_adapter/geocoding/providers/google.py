"""
Google Geocoding API provider.

Interprets Google Geocoding JSON responses: place types are classified onto
the Precision scale, address components are resolved into street / locality /
region / postal code / country, and the response status is mapped onto a
StatusOutcome.
https://developers.google.com/maps/documentation/geocoding
"""

import logging
from types import MappingProxyType
from typing import Iterable, List, Optional, Sequence, Union

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from geocode_adapter.core import settings
from geocode_adapter.geocoding.base import (
    BaseGeocoder,
    CredentialsError,
    GeocodingError,
    Location,
    MalformedResponseError,
)
from geocode_adapter.geocoding.precision import Precision
from geocode_adapter.geocoding.status import StatusKind, StatusOutcome

logger = logging.getLogger(__name__)

PROVIDER_NAME = "google"

PRECISION = MappingProxyType({
    "political": Precision.UNKNOWN,
    "colloquial_area": Precision.UNKNOWN,
    "natural_feature": Precision.UNKNOWN,
    "country": Precision.COUNTRY,
    "administrative_area_level_1": Precision.REGION,
    "administrative_area_level_2": Precision.REGION,
    "administrative_area_level_3": Precision.REGION,
    "locality": Precision.LOCALITY,
    "sublocality": Precision.POSTAL_CODE,
    "neighborhood": Precision.POSTAL_CODE,
    "postal_code": Precision.POSTAL_CODE,
    "intersection": Precision.STREET,
    "route": Precision.STREET,
    "street_address": Precision.ADDRESS,
    "premise": Precision.PREMISE,
    "subpremise": Precision.PREMISE,
    "airport": Precision.PREMISE,
    "park": Precision.PREMISE,
    "point_of_interest": Precision.PREMISE,
})

# Acceptable component types per Location field, highest priority first
ADDRESS_FIELDS = MappingProxyType({
    "street": ("route",),
    "locality": ("locality",),
    "region": (
        "administrative_area_level_1",
        "administrative_area_level_2",
        "administrative_area_level_3",
    ),
    "postal_code": ("postal_code",),
    "country": ("country",),
})

SUCCESS_STATUS = "OK"

STATUS_OUTCOMES = MappingProxyType({
    "ZERO_RESULTS": (StatusKind.ADDRESS_NOT_FOUND, "Address not found!"),
    "OVER_QUERY_LIMIT": (StatusKind.CREDENTIALS, "Too many queries!"),
    "REQUEST_DENIED": (
        StatusKind.CREDENTIALS,
        "Request denied! Is the API key valid and the Geocoding API enabled?",
    ),
    "INVALID_REQUEST": (
        StatusKind.CREDENTIALS,
        "Invalid request. Did you include an address or latlng?",
    ),
})


# =============================================================================
# Response models
# =============================================================================

class AddressComponent(BaseModel):
    """One fragment of a structured address."""
    model_config = ConfigDict(frozen=True)

    long_name: str
    short_name: str = ""
    types: List[str] = Field(default_factory=list)


class LatLng(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(strict=True, allow_inf_nan=False)
    lng: float = Field(strict=True, allow_inf_nan=False)


class Geometry(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: LatLng


class Result(BaseModel):
    """A single geocoding candidate."""
    model_config = ConfigDict(frozen=True)

    types: List[str] = Field(default_factory=list)
    address_components: List[AddressComponent] = Field(default_factory=list)
    geometry: Geometry

    @property
    def latitude(self) -> float:
        return self.geometry.location.lat

    @property
    def longitude(self) -> float:
        return self.geometry.location.lng

    @property
    def precision(self) -> Precision:
        return classify_precision(self.types)

    @property
    def street(self) -> Optional[str]:
        return extract_field("street", self.address_components)

    @property
    def locality(self) -> Optional[str]:
        return extract_field("locality", self.address_components)

    @property
    def region(self) -> Optional[str]:
        return extract_field("region", self.address_components)

    @property
    def postal_code(self) -> Optional[str]:
        return extract_field("postal_code", self.address_components)

    @property
    def country(self) -> Optional[str]:
        return extract_field("country", self.address_components)


class GeocodeResponse(BaseModel):
    """Top-level Geocoding API response."""
    model_config = ConfigDict(frozen=True)

    status: str
    results: List[Result] = Field(default_factory=list)


# =============================================================================
# Interpretation
# =============================================================================

def classify_precision(types: Optional[Iterable[str]]) -> Precision:
    """
    Classify a set of place types onto the Precision scale.

    The most specific recognized type wins. Unrecognized types are ignored;
    with nothing recognized the result is Precision.UNKNOWN.

    Example:
        >>> classify_precision(["country", "street_address"])
        <Precision.ADDRESS: 6>
    """
    candidates = [PRECISION[t] for t in (types or ()) if t in PRECISION]
    return max(candidates, default=Precision.UNKNOWN)


def address_component_value(
    components: Sequence[AddressComponent],
    component_type: str
) -> Optional[str]:
    """Return long_name of the first component tagged with `component_type`."""
    for component in components:
        if component_type in component.types:
            return component.long_name
    return None


def extract_field(field: str, components: Sequence[AddressComponent]) -> Optional[str]:
    """
    Resolve a Location field from address components.

    Each acceptable type for the field is tried against the whole component
    list in priority order, so administrative_area_level_1 beats _2 wherever
    it appears.

    Args:
        field: One of the ADDRESS_FIELDS keys
        components: Address components of a single result

    Returns:
        The matching component's long_name, or None
    """
    for component_type in ADDRESS_FIELDS[field]:
        value = address_component_value(components, component_type)
        if value is not None:
            return value
    return None


def classify_status(status: str) -> StatusOutcome:
    """Map a Geocoding API status code onto a StatusOutcome."""
    if status == SUCCESS_STATUS:
        return StatusOutcome(StatusKind.SUCCESS, status, provider=PROVIDER_NAME)
    if status in STATUS_OUTCOMES:
        kind, message = STATUS_OUTCOMES[status]
        return StatusOutcome(kind, status, message, provider=PROVIDER_NAME)
    return StatusOutcome(
        StatusKind.UNKNOWN, status, f"Unknown error: {status}", provider=PROVIDER_NAME
    )


def parse_response(payload: Union[str, bytes]) -> GeocodeResponse:
    """
    Deserialize a raw JSON payload.

    Raises:
        MalformedResponseError: invalid JSON, missing status, non-numeric
            coordinates or otherwise unexpected structure
    """
    try:
        return GeocodeResponse.model_validate_json(payload)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Unexpected response shape: {e}",
            provider=PROVIDER_NAME
        ) from e


def to_location(response: GeocodeResponse) -> Location:
    """
    Build a Location from the first result of a successful response.

    Further results are ignored; the provider orders them most likely first.
    The caller must have classified the status as a success and checked that
    results are present.
    """
    if not response.results:
        raise ValueError("to_location() requires a response with at least one result")

    result = response.results[0]
    return Location(
        latitude=result.latitude,
        longitude=result.longitude,
        street=result.street,
        locality=result.locality,
        region=result.region,
        postal_code=result.postal_code,
        country=result.country,
        precision=result.precision,
    )


# =============================================================================
# Client
# =============================================================================

class GoogleGeocoder(BaseGeocoder):
    """
    Google Geocoding API provider.

    Usage:
        geocoder = GoogleGeocoder()  # Uses GOOGLE_GEOCODING_API_KEY from env
        location = geocoder.locate("1600 Amphitheatre Pkwy, Mountain View, CA")
        location.coordinates
        #=> (37.423111, -122.081783)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Google Geocoder.

        Args:
            api_key: Google API key (uses settings if not provided)
            session: HTTP session to reuse; left open by close(). When not
                provided the geocoder opens its own on first request.
            timeout: Request timeout in seconds (uses settings if not provided)
        """
        self.api_key = api_key or settings.GOOGLE_GEOCODING_API_KEY
        self.url = settings.GOOGLE_GEOCODING_URL
        self.timeout = timeout if timeout is not None else settings.GOOGLE_GEOCODING_TIMEOUT
        self._session = session
        self._owns_session = session is None

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        """Close the HTTP session if this geocoder opened it."""
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def _request_params(self, address: str) -> dict:
        params = {
            "address": address,
            "key": self.api_key,
        }
        if settings.GOOGLE_GEOCODING_LANGUAGE:
            params["language"] = settings.GOOGLE_GEOCODING_LANGUAGE
        if settings.GOOGLE_GEOCODING_REGION:
            params["region"] = settings.GOOGLE_GEOCODING_REGION
        return params

    def locate(self, address: str) -> Location:
        """
        Geocode an address using Google Geocoding API.

        Args:
            address: Free-text address

        Returns:
            Location of the first result

        Raises:
            CredentialsError: no API key configured, or the provider refused
            GeocodingError: transport failure or any other provider error
        """
        if not self.api_key:
            raise CredentialsError(
                "GOOGLE_GEOCODING_API_KEY not configured",
                provider=self.provider_name,
                address=address
            )

        logger.debug(f"Google: Geocoding {address}")
        try:
            response = self.session.get(
                self.url,
                params=self._request_params(address),
                timeout=self.timeout
            )
        except requests.Timeout as e:
            logger.warning(f"Google: Timeout for {address}")
            raise GeocodingError("Request timed out", provider=self.provider_name, address=address) from e
        except requests.RequestException as e:
            logger.error(f"Google: Error geocoding {address}: {e}")
            raise GeocodingError(str(e), provider=self.provider_name, address=address) from e

        return self.interpret(response.text, address=address)

    def interpret(self, payload: Union[str, bytes], address: str = "") -> Location:
        """
        Run a raw response payload through parse, status check and Location
        assembly.

        Raises:
            MalformedResponseError: payload shape is wrong, or the provider
                reported success without any result
            AddressNotFoundError, CredentialsError, UnknownProviderError:
                non-success status
        """
        geocode_response = parse_response(payload)

        outcome = classify_status(geocode_response.status)
        if outcome.kind is StatusKind.ADDRESS_NOT_FOUND:
            logger.debug(f"Google: No results for {address}")
        elif not outcome.ok:
            logger.warning(f"Google API error: {outcome.status} ({outcome.message})")
        outcome.raise_for_status(address)

        if not geocode_response.results:
            raise MalformedResponseError(
                f"Status {geocode_response.status} but no results",
                provider=self.provider_name,
                address=address
            )

        if len(geocode_response.results) > 1:
            logger.debug(
                f"Google: {len(geocode_response.results)} results for {address}, using the first"
            )
        return to_location(geocode_response)
