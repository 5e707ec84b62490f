"""Domain layer - Result models and typed errors.

No external dependencies.
"""

from .errors import CouldNotGeocode, GeocoderError, ServiceError, TransportError
from .models import RESULT_NOT_FOUND, AddressQuery, CoordinateQuery, GeocodeResult

__all__ = [
    # Models
    "AddressQuery",
    "CoordinateQuery",
    "GeocodeResult",
    "RESULT_NOT_FOUND",
    # Errors
    "GeocoderError",
    "CouldNotGeocode",
    "TransportError",
    "ServiceError",
]
