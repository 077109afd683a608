from typing import List

from pydantic import BaseModel, ConfigDict


class _Body(BaseModel):
    # field names are the wire names; no aliasing, no extras, no coercion
    model_config = ConfigDict(extra="forbid", strict=True)

    def to_body(self) -> dict:
        return self.model_dump(mode="json")


class ChatMessage(_Body):
    role: str
    content: str


class ChatRequest(_Body):
    model: str
    messages: List[ChatMessage]
    stream: bool = False


class PullRequest(_Body):
    name: str
    stream: bool


class EmbeddingsRequest(_Body):
    model: str
    prompt: str


class PushRequest(_Body):
    name: str
    stream: bool
