"""Ports layer - Abstract interfaces (Protocols) for the adapter.

Ports define the contracts between callers and the concrete adapters,
so the HTTP transport can be injected and replaced in tests.
"""

from .geocoding import GeocoderPort
from .http import HttpClientPort, HttpResponsePort

__all__ = [
    # Geocoding
    "GeocoderPort",
    # HTTP
    "HttpClientPort",
    "HttpResponsePort",
]
