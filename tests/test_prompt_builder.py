"""Tests for prompt construction."""

from __future__ import annotations

import pytest

from writing_assistant.models.options import Action, Tone
from writing_assistant.pipeline.prompt_builder import build_prompt, language_label


class TestBuildPrompt:
    @pytest.mark.parametrize("action", list(Action))
    def test_input_text_is_verbatim_suffix(self, action, sample_text):
        prompt = build_prompt(action, sample_text, Tone.FORMAL, "es")
        assert prompt.endswith(sample_text)

    def test_rewrite_default_tone_has_no_tone_clause(self):
        prompt = build_prompt(Action.REWRITE, "hello there", Tone.DEFAULT)
        assert prompt == "Rewrite the following text:\n\nhello there"
        assert "tone" not in prompt

    @pytest.mark.parametrize("tone", [Tone.FORMAL, Tone.CASUAL, Tone.PROFESSIONAL])
    def test_rewrite_with_tone_includes_exact_label(self, tone):
        prompt = build_prompt(Action.REWRITE, "hello there", tone)
        assert prompt == f"Rewrite the following text in a {tone.value} tone:\n\nhello there"

    def test_rewrite_accepts_plain_string_tone(self):
        prompt = build_prompt("rewrite", "hi", "casual")
        assert "in a casual tone" in prompt

    def test_summarize_prompt(self):
        prompt = build_prompt(Action.SUMMARIZE, "long text")
        assert prompt == "Summarize the following text in 3-5 concise sentences:\n\nlong text"

    def test_summarize_ignores_tone_and_language(self):
        assert build_prompt(Action.SUMMARIZE, "x", Tone.CASUAL, "en") == build_prompt(Action.SUMMARIZE, "x")

    @pytest.mark.parametrize(
        ("code", "label"),
        [("en", "English"), ("hi", "Hindi"), ("es", "Spanish")],
    )
    def test_translate_uses_language_display_name(self, code, label):
        prompt = build_prompt(Action.TRANSLATE, "Good morning", target_language=code)
        assert prompt == f"Translate the following text into {label}:\n\nGood morning"

    def test_translate_unknown_code_echoes_code(self):
        prompt = build_prompt(Action.TRANSLATE, "Good morning", target_language="fr")
        assert prompt == "Translate the following text into fr:\n\nGood morning"

    def test_translate_defaults_to_hindi(self):
        assert "into Hindi" in build_prompt(Action.TRANSLATE, "text")

    def test_unknown_action_returns_text_unchanged(self):
        assert build_prompt("shout", "leave me alone") == "leave me alone"

    def test_braces_in_text_are_preserved(self):
        text = "config = {name}: {{value}}"
        assert build_prompt(Action.REWRITE, text).endswith(text)


class TestLanguageLabel:
    def test_known_code(self):
        assert language_label("es") == "Spanish"

    def test_unknown_code(self):
        assert language_label("pt-BR") == "pt-BR"
