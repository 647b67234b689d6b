"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from writing_assistant.clients.chat_client import ChatClient

TEST_API_KEY = "sk-test-key"


def _completion_body(content: str, prompt_tokens: int = 30, completion_tokens: int = 12) -> dict:
    """Build a chat-completion response body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": prompt_tokens + completion_tokens,
        },
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def sample_text() -> str:
    return (
        "Our team shipped the new billing dashboard last week. "
        "Customers can now download invoices and update payment methods themselves."
    )


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory for a transport returning a fixed status and JSON body."""

    def _make(status_code: int = 200, body: dict | None = None, content: bytes | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=body if body is not None else {})

        return RecordingTransport(handler)

    return _make


@pytest.fixture
def make_client() -> Callable[..., ChatClient]:
    """Factory for a ChatClient wired to a mock transport."""

    def _make(transport: httpx.AsyncBaseTransport, **kwargs) -> ChatClient:
        return ChatClient(TEST_API_KEY, transport=transport, **kwargs)

    return _make


@pytest.fixture
def completion_body() -> Callable[..., dict]:
    """Factory for a successful chat-completion body."""
    return _completion_body
