"""Immutable domain models for the geocoding adapter.

All models are frozen dataclasses with slots. ``GeocodeResult`` is the
only record handed back to callers; it is a pure value produced by a
single call and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

RESULT_NOT_FOUND = "result_not_found"


@dataclass(frozen=True, slots=True)
class AddressQuery:
    """Input for forward geocoding."""

    address: str


@dataclass(frozen=True, slots=True)
class CoordinateQuery:
    """Input for reverse geocoding.

    Coordinates are not range-checked; they are passed to the service
    as given.
    """

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class GeocodeResult:
    """Normalized geocoding record.

    Attributes:
        latitude: Latitude of the first match
        longitude: Longitude of the first match
        accuracy: Service location type (e.g. 'ROOFTOP')
        formatted_address: Full human-readable address
        city: Locality name, empty if none matched
        region: First-level administrative area, empty if none matched
        country: Country long name, empty if none matched
        iso_country_code: Country short code (e.g. 'US'), empty if none matched
    """

    latitude: float = 0.0
    longitude: float = 0.0
    accuracy: str = ""
    formatted_address: str = ""
    city: str = ""
    region: str = ""
    country: str = ""
    iso_country_code: str = ""

    @classmethod
    def not_found(cls) -> GeocodeResult:
        """Return the sentinel used when the service has no match."""
        return cls(
            latitude=0.0,
            longitude=0.0,
            accuracy=RESULT_NOT_FOUND,
            formatted_address=RESULT_NOT_FOUND,
        )

    @property
    def is_found(self) -> bool:
        """Check whether this record describes an actual match."""
        return self.accuracy != RESULT_NOT_FOUND

    def to_dict(self) -> Dict[str, Any]:
        """Return the compact record keyed the way the service names fields."""
        return {
            "lat": self.latitude,
            "lng": self.longitude,
            "accuracy": self.accuracy,
            "formatted_address": self.formatted_address,
            "city": self.city,
            "region": self.region,
            "country": self.country,
            "iso": self.iso_country_code,
        }
