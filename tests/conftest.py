"""Shared fixtures: a fake helloworld upstream behind httpx.MockTransport."""

from collections.abc import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from ping.app import create_app


class FakeUpstream:
    """Records every outbound request and answers with `respond`."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, text="hello"
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def upstream_client(upstream):
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def client(upstream_client):
    with TestClient(create_app(client=upstream_client)) as test_client:
        yield test_client
