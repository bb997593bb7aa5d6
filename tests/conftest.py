"""Shared test fixtures."""

from __future__ import annotations

import httpx
import pytest

from stockfighter.config import ClientConfig
from stockfighter.exchange import StockfighterClient

API_KEY = "test-api-key-123"
BASE_URL = "https://sf.test/ob/api"


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url=BASE_URL + "/", api_key=API_KEY, timeout_s=2.0)


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(config, requests_seen):
    """Build a client whose HTTP calls are answered by a stub.

    Call with a JSON-able *body*, or *content* for raw bytes, or a
    *handler* taking an httpx.Request. Every request is recorded in
    ``requests_seen``.
    """
    opened: list[StockfighterClient] = []

    def _make(body=None, *, content: bytes | None = None, status: int = 200, handler=None):
        def respond(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            if handler is not None:
                return handler(request)
            if content is not None:
                return httpx.Response(status, content=content)
            return httpx.Response(status, json=body)

        http = httpx.Client(transport=httpx.MockTransport(respond))
        client = StockfighterClient(config, http=http)
        opened.append(client)
        return client

    yield _make

    for client in opened:
        client.close()
        client.transport._http.close()
