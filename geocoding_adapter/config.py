"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- GEOCODER_GEO_API_KEY=...
- GEOCODER_GEO_LANGUAGE=fr
- GEOCODER_GEO_REGION=ca
- GEOCODER_LOG_LEVEL=DEBUG
- etc.

The adapter itself never reads the environment; these settings are only
used by ``GoogleGeocoderAdapter.from_config`` and the container.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GOOGLE_GEOCODE_ENDPOINT = "https://maps.googleapis.com/maps/api/geocode/json"


class GeocodingConfig(BaseSettings):
    """Geocoding configuration.

    Environment variables prefixed with GEOCODER_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="GEOCODER_GEO_")

    api_key: Optional[str] = None
    language: Optional[str] = None
    region: Optional[str] = None
    endpoint: str = GOOGLE_GEOCODE_ENDPOINT


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with GEOCODER_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="GEOCODER_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.geocoding.language)

    Environment variables prefixed with GEOCODER_.
    """

    model_config = SettingsConfigDict(env_prefix="GEOCODER_")

    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
