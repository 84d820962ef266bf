from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest

from edgesec import EdgeClient

BASE_URL = "https://edge.example"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_client() -> Iterator[Callable[[Handler], EdgeClient]]:
    """Build EdgeClients backed by a MockTransport; all are closed on teardown."""
    clients: list[EdgeClient] = []

    def factory(handler: Handler, **kwargs: object) -> EdgeClient:
        client = EdgeClient(base_url=BASE_URL, transport=httpx.MockTransport(handler), **kwargs)
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()
