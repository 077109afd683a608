import asyncio
import logging

from kazama.api import aclose_default_client, chat_completion
from kazama.api_schemas import ChatMessage, ChatRequest
from kazama.config import setup_logging
from kazama.observability.otel import setup_otel

logger = logging.getLogger(__name__)

MODEL = "gemma:2b"
PROMPT = "why is the moon white"


async def main() -> None:
    req = ChatRequest(
        model=MODEL,
        messages=[ChatMessage(role="user", content=PROMPT)],
        stream=False,
    )
    print(repr(req))
    try:
        logger.info("== chat %s ==", MODEL)
        reply = await chat_completion(req.model, req.messages[0].content, req.messages[0].role)
        print(reply)
    finally:
        await aclose_default_client()
    print(repr(req))


def run() -> None:
    setup_logging()
    provider = setup_otel()
    try:
        asyncio.run(main())
    finally:
        provider.shutdown()


if __name__ == "__main__":
    run()
