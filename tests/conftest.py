"""Shared fixtures: a recording fake of the HR API behind httpx.MockTransport."""

import json
from typing import Any

import httpx
import pytest

from hrmodule.config import ModuleConfig
from hrmodule.http.transport import Transport

BASE_URL = "http://hr.test"
MODULE_PREFIX = "/admin/v1/modules/hr/v1"
ADMIN_PREFIX = "/admin/admin/v1"


class FakeAPI:
    """Records every request and answers with a canned status + JSON body."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.payload: Any = {}
        self.token: str | None = "test-token"

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.payload is None:
            return httpx.Response(self.status)
        if isinstance(self.payload, str):
            return httpx.Response(self.status, text=self.payload)
        return httpx.Response(self.status, json=self.payload)

    def transport(self, config: ModuleConfig | None = None) -> Transport:
        return Transport(
            config or ModuleConfig(base_url=BASE_URL),
            token_provider=lambda: self.token,
            http_transport=httpx.MockTransport(self.handler),
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def transport(api: FakeAPI) -> Transport:
    return api.transport()
