import asyncio
from typing import Dict, List, Optional, Tuple

from kazama import endpoints
from kazama.api_schemas import (
    ChatMessage,
    ChatRequest,
    EmbeddingsRequest,
    PullRequest,
    PushRequest,
)
from kazama.models.base import ModelServerClient
from kazama.types import JsonDict, JsonValue, Message


class MockModelServerClient(ModelServerClient):
    """
    No network. Builds the same request bodies as the HTTP client and keeps
    them in ``calls`` as (method, path, body); replies come from ``replies``
    keyed by path, or a small canned default.
    """
    def __init__(self, replies: Optional[Dict[str, JsonValue]] = None, delay_s: float = 0.0) -> None:
        self.replies = dict(replies or {})
        self.delay_s = delay_s
        self.calls: List[Tuple[str, str, Optional[JsonDict]]] = []

    async def _reply(self, method: str, path: str, body: Optional[JsonDict] = None) -> JsonValue:
        self.calls.append((method, path, body))
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if path in self.replies:
            return self.replies[path]
        return self._default(path, body)

    @staticmethod
    def _default(path: str, body: Optional[JsonDict]) -> JsonValue:
        if path == endpoints.CHAT and body:
            last = next((m["content"] for m in reversed(body["messages"]) if m["role"] == "user"), "")
            return {
                "model": body["model"],
                "message": {"role": "assistant", "content": f"[mock] you said: {last}"},
                "done": True,
            }
        if path == endpoints.EMBEDDINGS:
            return {"embedding": [0.0, 0.0, 0.0]}
        if path in (endpoints.TAGS, endpoints.PS):
            return {"models": []}
        return {"status": "success"}

    async def chat(self, model: str, messages: List[Message]) -> JsonValue:
        req = ChatRequest(
            model=model,
            messages=[ChatMessage(role=m["role"], content=m["content"]) for m in messages],
            stream=False,
        )
        return await self._reply("POST", endpoints.CHAT, req.to_body())

    async def pull_model(self, name: str, stream_mode: bool) -> JsonValue:
        return await self._reply("POST", endpoints.PULL, PullRequest(name=name, stream=stream_mode).to_body())

    async def gen_embeddings(self, model: str, prompt: str) -> JsonValue:
        return await self._reply("POST", endpoints.EMBEDDINGS, EmbeddingsRequest(model=model, prompt=prompt).to_body())

    async def list_models(self) -> JsonValue:
        return await self._reply("GET", endpoints.PS)

    async def list_local_models(self) -> JsonValue:
        return await self._reply("GET", endpoints.TAGS)

    async def push_models(self, name: str, stream_mode: bool) -> JsonValue:
        return await self._reply("POST", endpoints.PUSH, PushRequest(name=name, stream=stream_mode).to_body())
