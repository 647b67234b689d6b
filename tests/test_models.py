"""Tests for option enums and chat-completion models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from writing_assistant.models import (
    TONE_LABELS,
    TRANSLATE_LANGUAGES,
    Action,
    ChatCompletion,
    RequestState,
    Tone,
)


class TestOptions:
    def test_actions(self):
        assert [a.value for a in Action] == ["rewrite", "summarize", "translate"]

    def test_every_tone_has_label(self):
        assert set(TONE_LABELS) == set(Tone)
        assert TONE_LABELS[Tone.PROFESSIONAL] == "Professional"

    def test_languages(self):
        assert TRANSLATE_LANGUAGES == {"en": "English", "hi": "Hindi", "es": "Spanish"}

    def test_enum_from_string(self):
        assert Action("translate") is Action.TRANSLATE
        assert Tone("casual") is Tone.CASUAL


class TestChatCompletion:
    def test_parses_first_content(self):
        completion = ChatCompletion.model_validate(
            {"choices": [{"message": {"role": "assistant", "content": "hi"}}]}
        )
        assert completion.first_content == "hi"
        assert completion.usage.prompt_tokens == 0

    def test_rejects_empty_choices(self):
        with pytest.raises(ValidationError):
            ChatCompletion.model_validate({"choices": []})

    def test_rejects_missing_content(self):
        with pytest.raises(ValidationError):
            ChatCompletion.model_validate({"choices": [{"message": {"role": "assistant"}}]})

    def test_ignores_unknown_fields(self):
        completion = ChatCompletion.model_validate(
            {
                "object": "chat.completion",
                "system_fingerprint": "fp_1",
                "choices": [{"message": {"content": "x"}, "logprobs": None}],
            }
        )
        assert completion.first_content == "x"


class TestRequestState:
    def test_defaults(self):
        state = RequestState()
        assert state.input_text == ""
        assert state.output_text == ""
        assert state.loading is False
        assert state.error is None

    def test_frozen(self):
        with pytest.raises(AttributeError):
            RequestState().loading = True  # type: ignore[misc]
