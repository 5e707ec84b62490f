import logging

from geocoding_adapter.config import (
    GOOGLE_GEOCODE_ENDPOINT,
    ObservabilityConfig,
    get_config,
    reset_config,
)
from geocoding_adapter.observability import configure_logging


def test_defaults():
    config = get_config()

    assert config.geocoding.api_key is None
    assert config.geocoding.language is None
    assert config.geocoding.region is None
    assert config.geocoding.endpoint == GOOGLE_GEOCODE_ENDPOINT
    assert config.observability.level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GEOCODER_GEO_API_KEY", "abc123")
    monkeypatch.setenv("GEOCODER_GEO_LANGUAGE", "ja")
    monkeypatch.setenv("GEOCODER_LOG_LEVEL", "DEBUG")

    config = get_config()

    assert config.geocoding.api_key == "abc123"
    assert config.geocoding.language == "ja"
    assert config.observability.level == "DEBUG"


def test_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    monkeypatch.setenv("GEOCODER_GEO_REGION", "nz")

    assert get_config() is first

    reset_config()

    assert get_config().geocoding.region == "nz"


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = root.handlers[:]
    try:
        configure_logging(ObservabilityConfig(level="warning"))

        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
