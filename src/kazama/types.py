from typing import Any, TypedDict

# Whatever the server sends back; never validated here.
JsonValue = Any
JsonDict = dict[str, Any]


class Message(TypedDict):
    role: str
    content: str
