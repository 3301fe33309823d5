"""Shared fixtures for device service tests.

The Afero API is replaced by an ``httpx.MockTransport`` so every test runs
without network access. Requests are recorded on ``FakeAfero.requests``.
"""

import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from hubspace_bridge.account import StaticAccount
from hubspace_bridge.main import build_device_service
from hubspace_bridge.settings import Settings


ACCOUNT_ID = "acct-1"


class FakeAfero:
    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], Any] = lambda request: httpx.Response(200, json={})

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responder(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def json_bodies(self) -> List[Any]:
        return [json.loads(r.content) for r in self.requests if r.content]

    def status_with(self, attributes: Optional[List[dict]] = None):
        self.responder = lambda request: httpx.Response(
            200, json={"id": "dev1", "attributes": attributes or []}
        )


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        API_BASE_URL="https://api.example.test/v1/",
        API_TOKEN="token-123",
        ACCOUNT_ID=ACCOUNT_ID,
        LOCK_TIMEOUT_MS=5000,
        _env_file=None,
    )


@pytest.fixture
def fake_afero() -> FakeAfero:
    return FakeAfero()


@pytest.fixture
def service(fake_afero, test_settings):
    return build_device_service(
        StaticAccount(ACCOUNT_ID),
        settings=test_settings,
        transport=httpx.MockTransport(fake_afero.handle),
    )
