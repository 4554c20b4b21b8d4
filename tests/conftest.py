"""Shared fixtures: a fake Jules API behind httpx.MockTransport."""

import json

import httpx
import pytest

from julesmcp.api.client import JulesClient

API_PREFIX = "/v1alpha"


class FakeJulesAPI:
    """Records requests and replays queued responses in order."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._queue: list[httpx.Response | Exception] = []

    def respond(self, body: dict | None = None, status_code: int = 200) -> None:
        self._queue.append(httpx.Response(status_code, json=body if body is not None else {}))

    def respond_text(self, text: str, status_code: int) -> None:
        self._queue.append(httpx.Response(status_code, text=text))

    def fail(self, exc: Exception) -> None:
        self._queue.append(exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._queue.pop(0) if self._queue else httpx.Response(200, json={})
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        return self.last.url.path.removeprefix(API_PREFIX)

    @property
    def last_params(self) -> dict:
        return dict(self.last.url.params)

    @property
    def last_json(self) -> dict | None:
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture
def api():
    return FakeJulesAPI()


@pytest.fixture
def client(api):
    return JulesClient("test-api-key", transport=httpx.MockTransport(api.handler))
