"""Async client for a local Ollama-compatible server, built on httpx.

One ``httpx.AsyncClient`` is held for the lifetime of the object so calls
reuse connections. Every operation is a single request/response exchange:
no retries, and the ``stream`` flag is forwarded but never consumed.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx
from opentelemetry import trace

from kazama import endpoints
from kazama.api_schemas import (
    ChatMessage,
    ChatRequest,
    EmbeddingsRequest,
    PullRequest,
    PushRequest,
)
from kazama.config import settings
from kazama.errors import RequestFailed
from kazama.models.base import ModelServerClient
from kazama.types import JsonValue, Message

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class OllamaHTTPClient(ModelServerClient):
    def __init__(
        self,
        timeout: Optional[float] = settings.HTTP_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=endpoints.BASE_URL,
            timeout=timeout,
            transport=transport,
        )

    async def _request(self, method: str, path: str, body: Optional[dict] = None, **attrs: Any) -> JsonValue:
        with tracer.start_as_current_span(f"{method} {path}") as span:
            span.set_attribute("http.method", method)
            span.set_attribute("http.url", endpoints.url_for(path))
            for k, v in attrs.items():
                span.set_attribute(f"kazama.{k}", v)

            logger.debug("-> %s %s", method, path)
            try:
                resp = await self._http.request(method, path, json=body)
                span.set_attribute("http.status_code", resp.status_code)
                logger.debug("<- %s %s status=%s", method, path, resp.status_code)
                # 4xx/5xx bodies are handed back like any other JSON
                return resp.json()
            except (httpx.HTTPError, ValueError) as e:
                logger.warning("%s %s failed: %r", method, path, e)
                raise RequestFailed(method, path, cause=e) from e

    async def chat(self, model: str, messages: List[Message]) -> JsonValue:
        req = ChatRequest(
            model=model,
            messages=[ChatMessage(role=m["role"], content=m["content"]) for m in messages],
            stream=False,
        )
        return await self._request("POST", endpoints.CHAT, req.to_body(), model=model)

    async def pull_model(self, name: str, stream_mode: bool) -> JsonValue:
        req = PullRequest(name=name, stream=stream_mode)
        return await self._request("POST", endpoints.PULL, req.to_body(), name=name)

    async def gen_embeddings(self, model: str, prompt: str) -> JsonValue:
        req = EmbeddingsRequest(model=model, prompt=prompt)
        return await self._request("POST", endpoints.EMBEDDINGS, req.to_body(), model=model)

    async def list_models(self) -> JsonValue:
        return await self._request("GET", endpoints.PS)

    async def list_local_models(self) -> JsonValue:
        return await self._request("GET", endpoints.TAGS)

    async def push_models(self, name: str, stream_mode: bool) -> JsonValue:
        req = PushRequest(name=name, stream=stream_mode)
        return await self._request("POST", endpoints.PUSH, req.to_body(), name=name)

    async def aclose(self) -> None:
        await self._http.aclose()
