"""Pydantic models for the chat-completion response body."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    role: str = "assistant"
    content: str


class ChatChoice(BaseModel):
    index: int = 0
    message: ChatMessage


class ChatUsage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatCompletion(BaseModel):
    """Subset of the chat-completion response the assistant consumes."""

    id: str | None = None
    model: str | None = None
    choices: list[ChatChoice] = Field(min_length=1)
    usage: ChatUsage = Field(default_factory=ChatUsage)

    @property
    def first_content(self) -> str:
        """Message content of the first choice; later choices are ignored."""
        return self.choices[0].message.content
