"""Pytest configuration and shared fixtures for tvdb-client-core tests."""

import httpx
import pytest

from tvdb_client import TheTVDbClient
from tvdb_client.transport import create_http_client

TEST_BASE_URL = "https://api.example.com"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear TheTVDB environment variables before each test."""
    import os

    for key in list(os.environ.keys()):
        if key.startswith("TVDB_"):
            monkeypatch.delenv(key, raising=False)

    yield


class ResponseQueue:
    """MockTransport handler replaying canned responses and errors in order.

    Every request is recorded in ``requests``. Exceptions in the queue are
    raised instead of answering.
    """

    def __init__(self, *items: httpx.Response | Exception):
        self.items = list(items)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.items.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def connection_error() -> httpx.ConnectError:
    return httpx.ConnectError("Error Communicating with Server", request=httpx.Request("GET", "test"))


@pytest.fixture
def make_client():
    """Factory for clients whose transport replays a ResponseQueue.

    A trailing connection error is appended so an unexpected second request
    fails loudly.
    """

    def _make(*items: httpx.Response | Exception, token: str | None = "ABC") -> tuple[TheTVDbClient, ResponseQueue]:
        queue = ResponseQueue(*items, connection_error())
        http_client = create_http_client(base_url=TEST_BASE_URL, transport=httpx.MockTransport(queue))
        client = TheTVDbClient(http_client)
        if token is not None:
            client.set_token(token)
        return client, queue

    return _make
