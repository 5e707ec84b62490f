"""Typed errors for the geocoding adapter.

Transport failures and errors reported by the geocoding service are
raised as distinct types so callers can tell an unreachable service
apart from one that answered with an explicit error. "No match" is
not an error: it is returned as the not-found ``GeocodeResult``.

All errors inherit from GeocoderError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GeocoderError(Exception):
    """Base error for the geocoding adapter.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class CouldNotGeocode(GeocoderError):
    """A geocoding request could not be completed."""

    @classmethod
    def could_not_connect(
        cls,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> TransportError:
        return TransportError(
            message="Could not connect to the geocoding service",
            cause=cause,
            status_code=status_code,
        )

    @classmethod
    def service_returned_error(cls, error_message: str) -> ServiceError:
        return ServiceError(message=error_message)


@dataclass
class TransportError(CouldNotGeocode):
    """The service did not answer with HTTP 200.

    Attributes:
        status_code: HTTP status received, None if no response arrived
    """

    status_code: Optional[int] = None


@dataclass
class ServiceError(CouldNotGeocode):
    """The service answered but reported an ``error_message``.

    The message is the service's own text, unchanged.
    """
