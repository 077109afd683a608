from abc import ABC, abstractmethod
from typing import List

from kazama.types import JsonValue, Message


class ModelServerClient(ABC):
    @abstractmethod
    async def chat(self, model: str, messages: List[Message]) -> JsonValue: ...

    async def chat_completion(self, model: str, content: str, role: str) -> JsonValue:
        return await self.chat(model, [{"role": role, "content": content}])

    @abstractmethod
    async def pull_model(self, name: str, stream_mode: bool) -> JsonValue: ...

    @abstractmethod
    async def gen_embeddings(self, model: str, prompt: str) -> JsonValue: ...

    @abstractmethod
    async def list_models(self) -> JsonValue: ...

    @abstractmethod
    async def list_local_models(self) -> JsonValue: ...

    @abstractmethod
    async def push_models(self, name: str, stream_mode: bool) -> JsonValue: ...

    async def aclose(self) -> None:
        return None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
