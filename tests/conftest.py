"""测试公共夹具。"""

from __future__ import annotations

from datetime import datetime
import json
from typing import Any

import httpx
import pytest

from topsdk import TopClient
from topsdk.toolkit.http import HttpClient

FIXED_NOW = datetime(2023, 9, 5, 9, 4, 17)


@pytest.fixture
def anyio_backend():
    return "asyncio"


class RecordingHandler:
    """记录收到的请求并返回固定响应的 httpx 传输处理函数。"""

    def __init__(self, body: Any = None, *, status_code: int = 200, text: str | None = None) -> None:
        self.body = body if body is not None else {}
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, content=json.dumps(self.body).encode("utf-8"))

    @property
    def called(self) -> bool:
        return bool(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
async def make_client(anyio_backend, fixed_clock):
    created: list[HttpClient] = []

    def _make(handler, **kwargs: Any) -> TopClient:
        kwargs.setdefault("app_key", "12345")
        kwargs.setdefault("app_secret", "test")
        http_client = HttpClient(transport=httpx.MockTransport(handler))
        created.append(http_client)
        return TopClient(http_client=http_client, clock=fixed_clock, **kwargs)

    yield _make

    for http_client in created:
        await http_client.close()
