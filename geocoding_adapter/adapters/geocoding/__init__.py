"""Geocoding adapters - Implementations of GeocoderPort.

Available implementations:
- GoogleGeocoderAdapter: Google Geocoding API
"""

from .google_adapter import GoogleGeocoderAdapter

__all__ = ["GoogleGeocoderAdapter"]
