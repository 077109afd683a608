import json

import httpx
import pytest

from kazama import api
from kazama.models.ollama_http import OllamaHTTPClient


class Recorder:
    """httpx handler that remembers requests and answers with a fixed reply."""

    def __init__(self, reply=None, status_code=200, content=None):
        self.reply = {"ok": True} if reply is None else reply
        self.status_code = status_code
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.reply)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self):
        return json.loads(self.last.content)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
async def client(recorder):
    c = OllamaHTTPClient(transport=httpx.MockTransport(recorder))
    yield c
    await c.aclose()


@pytest.fixture(autouse=True)
def _reset_default_client():
    api.set_default_client(None)
    yield
    api.set_default_client(None)


@pytest.fixture
def fresh_tracer_provider(monkeypatch):
    """Lets a test install the global tracer provider; undone afterwards."""
    from opentelemetry import trace
    from opentelemetry.util._once import Once

    monkeypatch.setattr(trace, "_TRACER_PROVIDER_SET_ONCE", Once())
    monkeypatch.setattr(trace, "_TRACER_PROVIDER", None)
    monkeypatch.delenv("OTEL_EXPORTER_OTLP_ENDPOINT", raising=False)
