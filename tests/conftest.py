"""Shared fixtures for the geocoding adapter tests."""

import os
import sys
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
import requests

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from geocoding_adapter.config import reset_config


def make_response(status_code: int = 200, body: Optional[Any] = None) -> MagicMock:
    """Build a response double exposing status_code and json()."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.json.return_value = body if body is not None else {"results": []}
    return response


def make_result(
    components: List[Dict[str, Any]],
    lat: float = 39.78,
    lng: float = -89.65,
    location_type: str = "ROOFTOP",
    formatted_address: str = "Springfield, IL, USA",
) -> Dict[str, Any]:
    return {
        "geometry": {
            "location": {"lat": lat, "lng": lng},
            "location_type": location_type,
        },
        "formatted_address": formatted_address,
        "address_components": components,
    }


@pytest.fixture
def springfield_body():
    return {
        "status": "OK",
        "results": [
            make_result(
                [
                    {
                        "long_name": "Springfield",
                        "short_name": "Springfield",
                        "types": ["locality", "political"],
                    },
                    {
                        "long_name": "Illinois",
                        "short_name": "IL",
                        "types": ["administrative_area_level_1", "political"],
                    },
                    {
                        "long_name": "United States",
                        "short_name": "US",
                        "types": ["country", "political"],
                    },
                ]
            )
        ],
    }


@pytest.fixture
def session():
    """HTTP client double answering 200 with no results by default."""
    mock = MagicMock(spec=requests.Session)
    mock.get.return_value = make_response()
    return mock


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def respond():
    """Factory fixture for response doubles."""
    return make_response


@pytest.fixture
def result_payload():
    """Factory fixture for a single entry of ``results``."""
    return make_result
