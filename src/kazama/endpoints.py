BASE_URL = "http://localhost:11434"

CHAT = "/api/chat"
PULL = "/api/pull"
EMBEDDINGS = "/api/embeddings"
TAGS = "/api/tags"
PS = "/api/ps"
PUSH = "/api/push"


def url_for(path: str) -> str:
    return f"{BASE_URL}{path}"
