"""Shared fixtures."""

import asyncio

import httpx
import pytest

from ghlist import GitHubClient
from mediagallery.config import ENV_FIELDS, env_var

BASE_URL = "https://api.example.test"

_http_clients: list[httpx.AsyncClient] = []


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure no MEDIAGALLERY_* variable leaks in or out of a test."""
    for name in ENV_FIELDS:
        # setenv first so teardown restores "absent" even if dotenv sets it
        monkeypatch.setenv(env_var(name), "")
        monkeypatch.delenv(env_var(name))


@pytest.fixture(autouse=True)
def close_http_clients():
    """Close every HTTP client created through mock_http."""
    yield

    async def close_all():
        for http in _http_clients:
            await http.aclose()

    asyncio.run(close_all())
    _http_clients.clear()


@pytest.fixture
def listing():
    """Contents listing as returned by the GitHub API."""
    return [
        {
            "name": "a.jpg",
            "path": "media/a.jpg",
            "sha": "1",
            "size": 10,
            "type": "file",
            "download_url": "https://raw.example.test/media/a.jpg",
        },
        {
            "name": "b",
            "path": "media/b",
            "sha": "2",
            "size": 0,
            "type": "dir",
            "download_url": None,
        },
        {
            "name": "c.mp4",
            "path": "media/c.mp4",
            "sha": "3",
            "size": 30,
            "type": "file",
            "download_url": "https://raw.example.test/media/c.mp4",
        },
    ]


def mock_http(handler=None) -> httpx.AsyncClient:
    """Async HTTP client on a mock transport, closed after the test."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler or json_handler([])))
    _http_clients.append(http)
    return http


def make_client(handler) -> GitHubClient:
    """GitHubClient backed by a mock transport."""
    return GitHubClient(base_url=BASE_URL, http_client=mock_http(handler))


def json_handler(payload, status_code: int = 200, requests: list | None = None):
    """Handler that answers every request with the same JSON payload."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, json=payload)

    return handler
