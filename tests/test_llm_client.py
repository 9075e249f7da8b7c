"""Unit tests for the Gemini-backed text generator."""
from __future__ import annotations

import asyncio
from types import SimpleNamespace
from typing import Any, List

import pytest

from doc_qa.errors import ExternalServiceError
from doc_qa.services import llm_client
from doc_qa.services.llm_client import GeminiClient


class StubChatModel:
    """Stand-in for ChatGoogleGenerativeAI recording how it was built."""

    instances: List["StubChatModel"] = []
    content: Any = ""
    error: Exception | None = None

    def __init__(self, **kwargs: Any) -> None:
        self.kwargs = kwargs
        self.prompts: List[str] = []
        StubChatModel.instances.append(self)

    async def ainvoke(self, prompt: str) -> SimpleNamespace:
        self.prompts.append(prompt)
        if StubChatModel.error is not None:
            raise StubChatModel.error
        return SimpleNamespace(content=StubChatModel.content)


@pytest.fixture
def chat_model(monkeypatch):
    monkeypatch.setattr(StubChatModel, "instances", [])
    monkeypatch.setattr(StubChatModel, "content", "")
    monkeypatch.setattr(StubChatModel, "error", None)
    monkeypatch.setattr(llm_client, "ChatGoogleGenerativeAI", StubChatModel)
    return StubChatModel


def test_generate_joins_text_parts(chat_model) -> None:
    chat_model.content = [{"type": "text", "text": "a"}, "b", {"type": "image_url", "image_url": "x"}]

    assert asyncio.run(GeminiClient(api_key="k").generate("p")) == "ab"
    assert chat_model.instances[0].prompts == ["p"]


def test_generate_returns_plain_string_content(chat_model) -> None:
    chat_model.content = "Plain answer"

    assert asyncio.run(GeminiClient(api_key="k").generate("p")) == "Plain answer"


def test_generate_wraps_failures_as_external_service_error(chat_model) -> None:
    chat_model.error = RuntimeError("quota")

    with pytest.raises(ExternalServiceError) as exc_info:
        asyncio.run(GeminiClient(api_key="k").generate("p"))

    assert exc_info.value.message == "quota"
    assert exc_info.value.status_code == 500


def test_chat_model_is_built_once_per_model_name(chat_model) -> None:
    client = GeminiClient(api_key="k", default_model="chat-model", temperature=0.2)

    asyncio.run(client.generate("first"))
    asyncio.run(client.generate("second"))
    asyncio.run(client.generate("third", model="translate-model"))

    assert [instance.kwargs["model"] for instance in chat_model.instances] == ["chat-model", "translate-model"]
    assert chat_model.instances[0].kwargs["api_key"] == "k"
    assert chat_model.instances[0].kwargs["temperature"] == 0.2
    assert chat_model.instances[0].prompts == ["first", "second"]
