from unittest.mock import MagicMock

import pytest
import requests

from geocoding_adapter.adapters.geocoding import GoogleGeocoderAdapter
from geocoding_adapter.config import AppConfig, GeocodingConfig
from geocoding_adapter.container import Container
from geocoding_adapter.ports.geocoding import GeocoderPort
from geocoding_adapter.ports.http import HttpClientPort


@pytest.fixture
def config():
    return AppConfig(geocoding=GeocodingConfig(api_key="container-key", language="es"))


def test_default_bindings(config):
    container = Container.create_default(config)

    geocoder = container.resolve(GeocoderPort)

    assert isinstance(geocoder, GoogleGeocoderAdapter)
    assert isinstance(geocoder.http_client, requests.Session)
    assert geocoder.api_key == "container-key"
    assert geocoder.language == "es"


def test_geocoder_and_session_are_singletons(config):
    container = Container.create_default(config)

    assert container.resolve(GeocoderPort) is container.resolve(GeocoderPort)
    assert container.resolve(GeocoderPort).http_client is container.resolve(HttpClientPort)


def test_http_client_can_be_replaced(config, session):
    container = Container.create_default(config)
    container.register(HttpClientPort, lambda: session)

    container.resolve(GeocoderPort).forward_geocode("Madrid")

    session.get.assert_called_once()
    assert session.get.call_args.kwargs["params"]["key"] == "container-key"


def test_non_singleton_registration():
    container = Container()
    container.register(HttpClientPort, MagicMock, singleton=False)

    assert container.resolve(HttpClientPort) is not container.resolve(HttpClientPort)


def test_unregistered_type_raises():
    container = Container()

    assert not container.is_registered(GeocoderPort)
    with pytest.raises(KeyError):
        container.resolve(GeocoderPort)


def test_clear_singletons(config):
    container = Container.create_default(config)
    first = container.resolve(HttpClientPort)

    container.clear_singletons()

    assert container.resolve(HttpClientPort) is not first


def test_close_closes_shared_session(config, session):
    container = Container.create_default(config)
    container.register(HttpClientPort, lambda: session)
    geocoder = container.resolve(GeocoderPort)

    container.close()

    session.close.assert_called_once()
    assert container.resolve(GeocoderPort) is not geocoder


def test_close_before_resolve_is_a_no_op(config):
    container = Container.create_default(config)

    container.close()

    assert container.is_registered(HttpClientPort)
