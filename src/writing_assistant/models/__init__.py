"""Data models for the writing assistant."""

from writing_assistant.models.chat import ChatCompletion, ChatUsage
from writing_assistant.models.options import (
    TONE_LABELS,
    TRANSLATE_LANGUAGES,
    Action,
    Tone,
)
from writing_assistant.models.state import Failure, RequestState, Success

__all__ = [
    "Action",
    "ChatCompletion",
    "ChatUsage",
    "Failure",
    "RequestState",
    "Success",
    "TONE_LABELS",
    "TRANSLATE_LANGUAGES",
    "Tone",
]
