from __future__ import annotations


class RequestFailed(RuntimeError):
    """
    The only error the client raises for a call: the transport failed
    (refused, timed out, DNS...) or the body was not JSON.
    HTTP error statuses are not failures as long as the body parses.
    """
    def __init__(self, method: str, endpoint: str, *, cause: Exception | None = None) -> None:
        detail = f": {cause!r}" if cause is not None else ""
        super().__init__(f"[{method} {endpoint}] request failed{detail}")
        self.method = method
        self.endpoint = endpoint
        self.cause = cause
