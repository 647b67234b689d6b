"""User-selectable options: actions, tones and translation targets."""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """Text transformation triggered by one of the action buttons."""

    REWRITE = "rewrite"
    SUMMARIZE = "summarize"
    TRANSLATE = "translate"


class Tone(str, Enum):
    """Stylistic modifier for the rewrite prompt."""

    DEFAULT = "default"
    FORMAL = "formal"
    CASUAL = "casual"
    PROFESSIONAL = "professional"


TONE_LABELS: dict[Tone, str] = {
    Tone.DEFAULT: "Default",
    Tone.FORMAL: "Formal",
    Tone.CASUAL: "Casual",
    Tone.PROFESSIONAL: "Professional",
}

# Language code -> display name used in the translate prompt
TRANSLATE_LANGUAGES: dict[str, str] = {
    "en": "English",
    "hi": "Hindi",
    "es": "Spanish",
}

DEFAULT_TRANSLATE_LANGUAGE = "hi"
