"""Global test configuration and fixtures."""

import os

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_FORMAT"] = "console"

from promptgen.infra.config.settings import Settings, get_settings  # noqa: E402


# ---------- API TESTING FIXTURES ----------


@pytest.fixture
def app():
    """FastAPI application instance for testing."""
    from promptgen.main import app

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(app):
    """Async FastAPI test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as ac:
        yield ac


@pytest.fixture
def override_settings(app):
    """Swap the settings seen by request dependencies."""

    def _override(**values) -> Settings:
        settings = Settings(**values)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    return _override


@pytest.fixture
def sample_generate_request():
    """Sample generate request payload."""
    return {"prompt": "Test", "instructions": "Example"}


# ---------- PYTEST CONFIGURATION ----------


def pytest_configure(config):
    """Configure pytest with custom settings."""
    markers = [
        "unit: Unit tests (fast, isolated)",
        "integration: Integration tests (full application stack)",
    ]

    for marker in markers:
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "api" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
