"""Test configuration and fixtures."""

import socket

import pytest
from fastapi.testclient import TestClient

from demo_api.core.config import Settings, get_settings
from demo_api.main import create_app


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment and cached settings out of every test."""
    for name in ("HOST", "PORT", "APP_TITLE", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings built without reading a .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def app(settings):
    """Fresh application instance."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def free_port():
    """Return a TCP port that nothing is listening on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
