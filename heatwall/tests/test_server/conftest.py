"""Test fixtures for server tests.

Builds the app with a copy of the default configuration so tests never
read ~/.heatwall/config.json.
"""

import copy

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from heatwall.config.loader import DEFAULT_CONFIG
from heatwall.server.app import create_app


@pytest.fixture
def test_config():
    """Default configuration, safe to mutate per test."""
    return copy.deepcopy(DEFAULT_CONFIG)


@pytest_asyncio.fixture
async def client(test_config):
    """Create an async test client."""
    app = create_app(config=test_config)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
