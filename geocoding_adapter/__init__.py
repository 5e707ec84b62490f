"""Google geocoding adapter.

Translates forward geocoding (address to coordinates) and reverse
geocoding (coordinates to address) into Google Geocoding API requests
and normalizes the responses into compact ``GeocodeResult`` records.

Typical use:

    import requests
    from geocoding_adapter import GoogleGeocoderAdapter

    geocoder = GoogleGeocoderAdapter(requests.Session()).set_api_key("...")
    result = geocoder.forward_geocode("Infinite Loop 1, Cupertino")
"""

from .adapters.geocoding import GoogleGeocoderAdapter
from .domain import (
    AddressQuery,
    CoordinateQuery,
    CouldNotGeocode,
    GeocodeResult,
    GeocoderError,
    RESULT_NOT_FOUND,
    ServiceError,
    TransportError,
)

__all__ = [
    "GoogleGeocoderAdapter",
    "AddressQuery",
    "CoordinateQuery",
    "GeocodeResult",
    "RESULT_NOT_FOUND",
    "GeocoderError",
    "CouldNotGeocode",
    "TransportError",
    "ServiceError",
]
