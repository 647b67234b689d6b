"""Prompt templates for the rewrite / summarize / translate actions."""

from __future__ import annotations

from writing_assistant.models.options import (
    DEFAULT_TRANSLATE_LANGUAGE,
    TRANSLATE_LANGUAGES,
    Action,
    Tone,
)

REWRITE_TEMPLATE = "Rewrite the following text{tone_clause}:\n\n{text}"
SUMMARIZE_TEMPLATE = "Summarize the following text in 3-5 concise sentences:\n\n{text}"
TRANSLATE_TEMPLATE = "Translate the following text into {language}:\n\n{text}"


def language_label(code: str) -> str:
    """Display name for a language code; unknown codes are echoed back."""
    return TRANSLATE_LANGUAGES.get(code) or code


def build_prompt(
    action: Action | str,
    text: str,
    tone: Tone | str = Tone.DEFAULT,
    target_language: str = DEFAULT_TRANSLATE_LANGUAGE,
) -> str:
    """Build the user message for an action.

    The input text always ends the prompt verbatim. ``tone`` only affects
    rewrite and ``target_language`` only affects translate. An unrecognised
    action returns the text unchanged.
    """
    try:
        action = Action(action)
    except ValueError:
        return text

    if action is Action.REWRITE:
        tone_value = tone.value if isinstance(tone, Tone) else str(tone)
        tone_clause = f" in a {tone_value} tone" if tone_value != Tone.DEFAULT.value else ""
        return REWRITE_TEMPLATE.format(tone_clause=tone_clause, text=text)
    if action is Action.SUMMARIZE:
        return SUMMARIZE_TEMPLATE.format(text=text)
    return TRANSLATE_TEMPLATE.format(language=language_label(target_language), text=text)
