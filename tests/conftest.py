"""Pytest configuration for all tests."""

import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio
import structlog

from shopbind.core.config import Settings, get_settings
from shopbind.infrastructure.http.client import ShopClient

BASE_URL = "https://test-shop.myshopify.com"


class FakeShopAPI:
    """In-memory stand-in for the Admin API, served through httpx.MockTransport.

    Routes are keyed by (method, path). Every request is recorded so tests
    can assert on paths, query strings and bodies.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any, dict[str, str] | None]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        headers: dict[str, str] | None = None,
        text: str | None = None,
    ) -> None:
        body = text if text is not None else json
        self.routes[(method, path)] = (status_code, body, headers)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"errors": "Not Found"})
        status_code, body, headers = route
        if body is None:
            return httpx.Response(status_code, headers=headers)
        if isinstance(body, str):
            return httpx.Response(status_code, text=body, headers=headers)
        return httpx.Response(status_code, json=body, headers=headers)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Keep cached settings and logging configuration from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        base_url=BASE_URL,
        access_token="test-token",
        environment="testing",
    )


@pytest.fixture
def fake_api() -> FakeShopAPI:
    return FakeShopAPI()


@pytest_asyncio.fixture
async def client(settings: Settings, fake_api: FakeShopAPI) -> AsyncGenerator[ShopClient, None]:
    """ShopClient wired to the fake API."""
    shop_client = ShopClient(settings=settings, transport=httpx.MockTransport(fake_api.handler))
    yield shop_client
    await shop_client.aclose()
