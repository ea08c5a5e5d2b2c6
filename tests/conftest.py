"""Pytest fixtures for jina-client tests."""

import os
from unittest.mock import patch

import httpx
import pytest

from jina_client.client import JinaClient
from jina_client.config import Settings, with_api_key
from jina_client.main import configure_logging


@pytest.fixture(scope="session", autouse=True)
def stderr_logging():
    """Route client logs through stdlib logging so stdout carries only command output."""
    configure_logging(log_level="WARNING")


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    env_vars = {
        "JINA_API_KEY": "test-key",
        "JINA_EU_COMPLIANCE": "false",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def settings(mock_env_vars) -> Settings:
    """Create Settings instance with mocked environment."""
    return Settings()


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Requests captured by clients built with make_client."""
    return []


@pytest.fixture
def make_client(sent_requests):
    """Build a JinaClient whose HTTP calls are answered by ``responder``.

    ``responder`` receives the httpx.Request and returns an httpx.Response.
    Every request is appended to ``sent_requests``.
    """

    def _make(responder, *options) -> JinaClient:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return responder(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return JinaClient(with_api_key("test-key"), *options, http_client=http_client)

    return _make
