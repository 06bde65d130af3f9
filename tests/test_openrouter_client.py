import asyncio
from types import SimpleNamespace

from ai_services.openrouter_client import THERAPY_SYSTEM_PROMPT, OpenRouterClient
from config import Config
from database.models import Message, MessageRole


class FakeCompletions:
    def __init__(self, content="Tell me more.", error=None, choices=True):
        self.content = content
        self.error = error
        self.choices = choices
        self.requests = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        if self.error:
            raise self.error
        choices = [SimpleNamespace(message=SimpleNamespace(content=self.content))] if self.choices else []
        return SimpleNamespace(choices=choices, usage=SimpleNamespace(total_tokens=42))


def _client(config, completions):
    sdk = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return OpenRouterClient(config, client=sdk)


def test_missing_key_is_refused_locally():
    client = OpenRouterClient(Config(openrouter_api_key=None))
    try:
        result = asyncio.run(client.generate_therapy_response("hello", "c1"))
    finally:
        client.close()

    assert client.client is None
    assert result["success"] is False
    assert "OPENROUTER_API_KEY" in result["error"]


def test_request_carries_prompt_history_and_settings():
    config = Config(openrouter_api_key="key", history_window=2)
    completions = FakeCompletions()
    client = _client(config, completions)
    history = [
        Message(role=MessageRole.ASSISTANT, text="Hello"),
        Message(role=MessageRole.USER, text="first"),
        Message(role=MessageRole.ASSISTANT, text="second"),
    ]

    try:
        result = asyncio.run(client.generate_therapy_response("now", "c1", history))
    finally:
        client.close()

    assert result["success"] is True
    assert result["response"] == "Tell me more."
    request = completions.requests[0]
    assert request["temperature"] == 0.7
    assert request["max_tokens"] == 800
    assert request["messages"] == [
        {"role": "system", "content": THERAPY_SYSTEM_PROMPT},
        {"role": "user", "content": "first"},
        {"role": "assistant", "content": "second"},
        {"role": "user", "content": "now"},
    ]


def test_remote_failures_become_result_dicts():
    config = Config(openrouter_api_key="key")

    for completions in (FakeCompletions(error=RuntimeError("timeout")),
                        FakeCompletions(choices=False),
                        FakeCompletions(content=None)):
        client = _client(config, completions)
        try:
            result = asyncio.run(client.generate_therapy_response("hi", "c1"))
        finally:
            client.close()

        assert result["success"] is False
        assert result["response"] is None
