"""Integration test fixtures.

Provides FastAPI test clients over applications built by create_app with
widget resources backed by in-memory fakes.
"""

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from easyrest.domain.resource import ResourceDescriptor
from easyrest.infrastructure.config.settings import Settings
from easyrest.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests, independent of the environment and .env files."""
    return Settings(_env_file=None, environment="test", api_prefix="/api", log_level="DEBUG")


@pytest.fixture
def make_client(test_settings) -> Generator[Callable[..., TestClient]]:
    """
    Provide a factory building a test client for a set of descriptors.

    Server exceptions are turned into responses rather than re-raised, so
    tests see exactly what a client would.
    """
    clients: list[TestClient] = []

    def factory(*descriptors: ResourceDescriptor) -> TestClient:
        app = create_app(descriptors, settings=test_settings)
        test_client = TestClient(app, raise_server_exceptions=False)
        clients.append(test_client)
        return test_client

    yield factory

    for test_client in clients:
        test_client.close()


@pytest.fixture
def client(make_client, descriptor) -> TestClient:
    """Create a test client exposing the full widget resource at /api/widgets."""
    return make_client(descriptor)
