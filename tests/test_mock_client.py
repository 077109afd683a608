import asyncio

from kazama.models.mock_client import MockModelServerClient


async def test_mock_records_bodies_like_the_http_client():
    mock = MockModelServerClient()
    reply = await mock.chat_completion("m", "Hello!", "user")

    assert reply["message"]["content"] == "[mock] you said: Hello!"
    assert mock.calls == [
        ("POST", "/api/chat", {"model": "m", "messages": [{"role": "user", "content": "Hello!"}], "stream": False}),
    ]


async def test_mock_uses_configured_replies():
    mock = MockModelServerClient(replies={"/api/ps": {"models": [{"name": "gemma:2b"}]}})
    assert await mock.list_models() == {"models": [{"name": "gemma:2b"}]}
    assert await mock.list_local_models() == {"models": []}


async def test_mock_pull_push_embeddings():
    mock = MockModelServerClient(delay_s=0.001)
    await asyncio.gather(
        mock.pull_model("a", True),
        mock.push_models("b", False),
        mock.gen_embeddings("c", "text"),
    )
    assert sorted(mock.calls) == [
        ("POST", "/api/embeddings", {"model": "c", "prompt": "text"}),
        ("POST", "/api/pull", {"name": "a", "stream": True}),
        ("POST", "/api/push", {"name": "b", "stream": False}),
    ]
