"""HTTP port - The injected transport capability.

The geocoding adapter issues exactly one GET per call through this
port. Connection pooling, TLS, retries and timeouts are the concern of
the implementation; ``requests.Session`` satisfies the protocol as is.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class HttpResponsePort(Protocol):
    """The part of an HTTP response the adapter reads."""

    status_code: int

    def json(self, **kwargs: Any) -> Any:
        """Decode the body as JSON."""
        ...


class HttpClientPort(Protocol):
    """Port for a synchronous HTTP client.

    Implementation: ``requests.Session`` (see container.py)
    """

    def get(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> HttpResponsePort:
        """Issue a GET request with query parameters.

        Args:
            url: Absolute URL to request.
            params: Query parameters to encode into the URL.

        Returns:
            The response, whatever its status code.
        """
        ...
