"""Google Geocoding API adapter.

Builds the query for forward and reverse lookups, sends one GET per
call through the injected HTTP client and maps the first result into a
``GeocodeResult``. No caching, retries or rate limiting happen here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Union

import requests

from ...config import GOOGLE_GEOCODE_ENDPOINT, GeocodingConfig, get_config
from ...domain.errors import CouldNotGeocode
from ...domain.models import AddressQuery, CoordinateQuery, GeocodeResult
from ...ports.http import HttpClientPort
from .schemas import GeocodingResponse, GeocodingResultPayload


def format_coordinate(value: float) -> str:
    """Render a coordinate in plain decimal notation.

    Independent of locale, never uses exponent notation and keeps the
    precision of the float's shortest representation. Integral values
    drop the fractional part.
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass
class GoogleGeocoderAdapter:
    """Google geocoder adapter.

    This adapter implements GeocoderPort against the Google Geocoding
    API. Configuration is read at call time, so setters affect the next
    request.

    Attributes:
        http_client: Injected HTTP client (e.g. ``requests.Session``)
        api_key: API key sent as ``key``
        language: Preferred result language, omitted when None
        region: Region bias, omitted when None
        endpoint: Geocoding endpoint URL
    """

    http_client: HttpClientPort
    api_key: Optional[str] = None
    language: Optional[str] = None
    region: Optional[str] = None
    endpoint: str = GOOGLE_GEOCODE_ENDPOINT

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_config(
        cls,
        http_client: HttpClientPort,
        config: Optional[GeocodingConfig] = None,
    ) -> GoogleGeocoderAdapter:
        """Build an adapter from geocoding settings.

        Args:
            http_client: HTTP client used for every request.
            config: Settings to copy; defaults to the global configuration.
        """
        config = config or get_config().geocoding
        return cls(
            http_client=http_client,
            api_key=config.api_key,
            language=config.language,
            region=config.region,
            endpoint=config.endpoint,
        )

    def set_api_key(self, api_key: str) -> GoogleGeocoderAdapter:
        self.api_key = api_key
        return self

    def set_language(self, language: str) -> GoogleGeocoderAdapter:
        self.language = language
        return self

    def set_region(self, region: str) -> GoogleGeocoderAdapter:
        self.region = region
        return self

    def forward_geocode(self, address: str) -> GeocodeResult:
        """Geocode an address.

        Args:
            address: Free-form address text.

        Returns:
            The first match, or the not-found result. An empty address
            returns the not-found result without a request.

        Raises:
            TransportError: If the service did not answer with HTTP 200.
            ServiceError: If the service reported an error message.
        """
        if not address:
            return GeocodeResult.not_found()

        return self._geocode({"address": address})

    def reverse_geocode(self, latitude: float, longitude: float) -> GeocodeResult:
        """Reverse geocode coordinates.

        Args:
            latitude: Latitude in decimal degrees.
            longitude: Longitude in decimal degrees.

        Returns:
            The first match, or the not-found result.

        Raises:
            TransportError: If the service did not answer with HTTP 200.
            ServiceError: If the service reported an error message.
        """
        latlng = f"{format_coordinate(latitude)},{format_coordinate(longitude)}"
        return self._geocode({"latlng": latlng})

    def lookup(self, query: Union[AddressQuery, CoordinateQuery]) -> GeocodeResult:
        """Run the operation matching the query type."""
        if isinstance(query, CoordinateQuery):
            return self.reverse_geocode(query.latitude, query.longitude)
        if isinstance(query, AddressQuery):
            return self.forward_geocode(query.address)
        raise TypeError(f"Unsupported geocoding query: {type(query).__name__}")

    def _request_params(self, parameters: Dict[str, str]) -> Dict[str, Any]:
        base: Dict[str, Any] = {
            "key": self.api_key,
            "language": self.language,
            "region": self.region,
        }
        base.update(parameters)
        return {name: value for name, value in base.items() if value is not None}

    def _geocode(self, parameters: Dict[str, str]) -> GeocodeResult:
        params = self._request_params(parameters)

        self._logger.debug(
            "Geocode request",
            extra={"endpoint": self.endpoint, "query": parameters},
        )

        try:
            response = self.http_client.get(self.endpoint, params=params)
        except requests.RequestException as e:
            self._logger.warning(
                "Geocode transport failure",
                extra={"query": parameters, "error": str(e)},
            )
            raise CouldNotGeocode.could_not_connect(cause=e) from e

        if response.status_code != 200:
            self._logger.warning(
                "Geocode service unreachable",
                extra={"query": parameters, "status_code": response.status_code},
            )
            raise CouldNotGeocode.could_not_connect(status_code=response.status_code)

        payload = GeocodingResponse.model_validate(response.json())

        if payload.error_message:
            self._logger.warning(
                "Geocode service returned an error",
                extra={
                    "query": parameters,
                    "status": payload.status,
                    "error": payload.error_message,
                },
            )
            raise CouldNotGeocode.service_returned_error(payload.error_message)

        if not payload.results:
            self._logger.debug("Geocode returned no result", extra={"query": parameters})
            return GeocodeResult.not_found()

        return self._format_result(payload.results[0])

    def _format_result(self, result: GeocodingResultPayload) -> GeocodeResult:
        city = region = country = iso_country_code = ""

        # Independent checks: a later component, or a later type on the
        # same component, overwrites the city.
        for component in result.address_components:
            if component.has_type("sublocality"):
                city = component.long_name
            if component.has_type("administrative_area_level_2"):
                city = component.long_name
            if component.has_type("locality"):
                city = component.long_name
            if component.has_type("postal_town"):
                city = component.long_name
            if component.has_type("administrative_area_level_1"):
                region = component.long_name
            if component.has_type("country"):
                country = component.long_name
                iso_country_code = component.short_name

        return GeocodeResult(
            latitude=result.geometry.location.lat,
            longitude=result.geometry.location.lng,
            accuracy=result.geometry.location_type,
            formatted_address=result.formatted_address,
            city=city,
            region=region,
            country=country,
            iso_country_code=iso_country_code,
        )
