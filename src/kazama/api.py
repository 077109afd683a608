"""
One coroutine per server endpoint, all sharing a lazily created
``OllamaHTTPClient``:

    import asyncio
    from kazama.api import chat_completion

    reply = asyncio.run(chat_completion("model_name", "Hello!", "user"))

Each returns the parsed JSON reply or raises ``RequestFailed``.

httpx pools are bound to the event loop that opened them, so the shared
client is rebuilt when a call arrives on a different loop (e.g. a second
``asyncio.run``).
"""
import asyncio
from typing import List, Optional

from kazama.models.base import ModelServerClient
from kazama.models.ollama_http import OllamaHTTPClient
from kazama.types import JsonValue, Message

_client: Optional[ModelServerClient] = None
# loop the shared client was built on; None for clients handed in via set_default_client
_client_loop: Optional[asyncio.AbstractEventLoop] = None


def get_default_client() -> ModelServerClient:
    """Must be called from a coroutine."""
    global _client, _client_loop
    loop = asyncio.get_running_loop()
    if _client is None or (_client_loop is not None and _client_loop is not loop):
        # the old loop is gone (or busy elsewhere); its connections can't be reused
        _client = OllamaHTTPClient()
        _client_loop = loop
    return _client


def set_default_client(client: Optional[ModelServerClient]) -> None:
    """Swap the shared client (tests, mocks). The old one is not closed."""
    global _client, _client_loop
    _client = client
    _client_loop = None


async def aclose_default_client() -> None:
    global _client, _client_loop
    if _client is not None:
        client, _client, _client_loop = _client, None, None
        await client.aclose()


async def chat_completion(model: str, content: str, role: str) -> JsonValue:
    return await get_default_client().chat_completion(model, content, role)


async def chat(model: str, messages: List[Message]) -> JsonValue:
    return await get_default_client().chat(model, messages)


async def pull_model(name: str, stream_mode: bool) -> JsonValue:
    return await get_default_client().pull_model(name, stream_mode)


async def gen_embeddings(model: str, prompt: str) -> JsonValue:
    return await get_default_client().gen_embeddings(model, prompt)


async def list_models() -> JsonValue:
    """``GET /api/ps``: models currently loaded in memory."""
    return await get_default_client().list_models()


async def list_local_models() -> JsonValue:
    """``GET /api/tags``: models available locally."""
    return await get_default_client().list_local_models()


async def push_models(name: str, stream_mode: bool) -> JsonValue:
    return await get_default_client().push_models(name, stream_mode)
