"""Typed models for the Google Geocoding API JSON body.

Only the fields the adapter reads are declared; everything else in the
payload is ignored.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    model_config = ConfigDict(extra="ignore")

    lat: float
    lng: float


class Geometry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    location: Location
    location_type: str = ""


class AddressComponent(BaseModel):
    """A tagged piece of a postal address (city, region, country...)."""

    model_config = ConfigDict(extra="ignore")

    long_name: str = ""
    short_name: str = ""
    types: List[str] = Field(default_factory=list)

    def has_type(self, type_name: str) -> bool:
        return type_name in self.types


class GeocodingResultPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    geometry: Geometry
    formatted_address: str = ""
    address_components: List[AddressComponent] = Field(default_factory=list)


class GeocodingResponse(BaseModel):
    """Top-level response envelope.

    ``results`` is ordered by the service's relevance ranking.
    """

    model_config = ConfigDict(extra="ignore")

    results: List[GeocodingResultPayload] = Field(default_factory=list)
    status: Optional[str] = None
    error_message: Optional[str] = None
