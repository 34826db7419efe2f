import json

import httpx
import pytest

from python_http_client import Client, Response
from python_http_client._utils.constants import ENV_DISABLE_SSL_VERIFY

HOST = "https://api.example.com"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, status_code=200, body="", headers=None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            content=self.body.encode(),
            headers=self.headers,
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(ENV_DISABLE_SSL_VERIFY, raising=False)


@pytest.fixture
def transport():
    return RecordingTransport(status_code=200, body='{"ok": true}')


@pytest.fixture
def client(transport):
    return Client(
        HOST,
        request_headers={"Authorization": "Bearer token"},
        transport=transport,
    )


@pytest.fixture
def captured_specs(monkeypatch):
    """Replace the network call, collecting the assembled request specs."""
    specs = []

    def fake_make_request(self, spec):
        specs.append(spec)
        return Response(status_code=200)

    monkeypatch.setattr(Client, "_make_request", fake_make_request)
    return specs
