"""Dependency injection container.

Wires the default HTTP client and geocoder without a DI framework.
Callers that build their own ``GoogleGeocoderAdapter`` do not need it.

Design principles:
1. Explicit registration and resolution
2. Testable - easy to swap the HTTP client
3. Lazy loading - instances created on first resolve
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        geocoder = container.resolve(GeocoderPort)

        # Testing
        container = Container.create_default()
        container.register(HttpClientPort, lambda: fake_session)
        geocoder = container.resolve(GeocoderPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Re-registering a type drops any instance already built for it.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    def close(self) -> None:
        """Close cached instances that hold resources, then drop them.

        The shared HTTP session is closed here; registrations are kept,
        so resolving again builds fresh instances.
        """
        with self._lock:
            for instance in self._singletons.values():
                close = getattr(instance, "close", None)
                if callable(close):
                    close()
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The HTTP client is a single shared ``requests.Session``; every
        geocoder resolved from the container uses it.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        import requests

        from .adapters.geocoding import GoogleGeocoderAdapter
        from .ports.geocoding import GeocoderPort
        from .ports.http import HttpClientPort

        config = config or get_config()
        container = cls(config=config)

        # HTTP
        container.register(HttpClientPort, requests.Session)

        # Geocoding
        container.register(
            GeocoderPort,
            lambda: GoogleGeocoderAdapter.from_config(
                container.resolve(HttpClientPort), config.geocoding
            ),
        )

        return container
