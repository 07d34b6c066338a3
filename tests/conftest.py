"""
Shared fixtures for the SWAPI Gateway test suite.

The upstream client is always a MagicMock bound to the port spec and
injected through create_app(). No test touches the network.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from swapi_gateway.domain.starwars.ports import StarWarsClientPort
from swapi_gateway.main import create_app


@pytest.fixture
def swapi_client() -> MagicMock:
    """Upstream port double. Configure return_value/side_effect per test."""
    return MagicMock(spec=StarWarsClientPort)


@pytest.fixture
def client(swapi_client: MagicMock) -> TestClient:
    """HTTP client against an app wired to the port double."""
    return TestClient(create_app(swapi_client=swapi_client))
