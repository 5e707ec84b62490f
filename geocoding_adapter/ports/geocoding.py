"""Geocoding port - Abstraction for forward and reverse geocoding.

This protocol defines the contract for geocoding services, allowing
callers to depend on it rather than on the Google implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Union

if TYPE_CHECKING:
    from ..domain.models import AddressQuery, CoordinateQuery, GeocodeResult


class GeocoderPort(Protocol):
    """Port for geocoding services.

    Implementation: adapters/geocoding/google_adapter.py

    Both operations return the not-found ``GeocodeResult`` when there is
    no match and raise ``CouldNotGeocode`` when the service fails.
    """

    def forward_geocode(self, address: str) -> GeocodeResult:
        """Geocode an address to coordinates and address details.

        Args:
            address: Free-form address text.

        Returns:
            The first match, or the not-found result.
        """
        ...

    def reverse_geocode(self, latitude: float, longitude: float) -> GeocodeResult:
        """Reverse geocode coordinates to address details.

        Args:
            latitude: Latitude in decimal degrees.
            longitude: Longitude in decimal degrees.

        Returns:
            The first match, or the not-found result.
        """
        ...

    def lookup(self, query: Union[AddressQuery, CoordinateQuery]) -> GeocodeResult:
        """Dispatch a query object to the matching operation."""
        ...
