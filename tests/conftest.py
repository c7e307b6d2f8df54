"""Shared fixtures: an in-process fake Nginx Proxy Manager.

FakeNpm answers through httpx.MockTransport, so NpmApiClient runs its real
request path without any network access. Every request is recorded.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from npm_mcp.api.client import NpmApiClient
from npm_mcp.config import NpmConfig

NPM_URL = "http://npm.test"
FUTURE_EXPIRY = "2099-01-01T00:00:00.000Z"
PAST_EXPIRY = "2000-01-01T00:00:00.000Z"


class FakeNpm:
    """Minimal NPM API double.

    Routes are keyed by (method, path). Unknown routes answer 404 with an
    NPM-style error body.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.token_status = 200
        self.token_expires = FUTURE_EXPIRY
        self.token_calls = 0

    def route(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json_body: Any = None,
        text: str | None = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            if json_body is None:
                return httpx.Response(status)
            return httpx.Response(status, json=json_body)

        self.routes[(method, path)] = respond

    def expire_tokens(self, expired: bool = True) -> None:
        """Make newly issued tokens already expired (or valid again)."""
        self.token_expires = PAST_EXPIRY if expired else FUTURE_EXPIRY

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if (request.method, request.url.path) == ("POST", "/api/tokens"):
            self.token_calls += 1
            if self.token_status != 200:
                return httpx.Response(self.token_status, text='{"error":{"message":"Invalid email or password"}}')
            return httpx.Response(200, json={"token": f"token-{self.token_calls}", "expires": self.token_expires})

        respond = self.routes.get((request.method, request.url.path))
        if respond is None:
            return httpx.Response(404, json={"error": {"code": 404, "message": "Not Found"}})
        return respond(request)

    @property
    def api_requests(self) -> list[httpx.Request]:
        """Recorded requests other than token requests."""
        return [r for r in self.requests if r.url.path != "/api/tokens"]

    def last_body(self) -> dict[str, Any]:
        return json.loads(self.api_requests[-1].content)


@pytest.fixture
def fake_npm() -> FakeNpm:
    return FakeNpm()


@pytest.fixture
def http_client(fake_npm: FakeNpm) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_npm.handler))


@pytest.fixture
def config() -> NpmConfig:
    return NpmConfig(url=NPM_URL, email="admin@example.com", password="changeme")


@pytest.fixture
def readonly_config() -> NpmConfig:
    return NpmConfig(url=NPM_URL, email="admin@example.com", password="changeme", readonly=True)


@pytest.fixture
def npm_client(config: NpmConfig, http_client: httpx.AsyncClient) -> NpmApiClient:
    return NpmApiClient(config, http_client=http_client)


@pytest.fixture
def readonly_client(readonly_config: NpmConfig, http_client: httpx.AsyncClient) -> NpmApiClient:
    return NpmApiClient(readonly_config, http_client=http_client)
