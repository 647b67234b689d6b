"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from writing_assistant.models.options import (
    DEFAULT_TRANSLATE_LANGUAGE,
    TRANSLATE_LANGUAGES,
    Tone,
)

# Checked in order; the first non-empty value wins
API_KEY_ENV_VARS = ("API_KEY", "OPENAI_API_KEY")


@dataclass(frozen=True)
class ChatConfig:
    api_url: str = "https://api.openai.com/v1/chat/completions"
    model: str = "gpt-3.5-turbo"
    max_tokens: int = 512
    system_prompt: str = "You are a helpful AI writing assistant."
    timeout: float = 60.0
    max_retries: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.max_tokens <= 16384:
            raise ValueError(f"max_tokens must be between 1 and 16384, got {self.max_tokens}")
        if self.timeout < 1:
            raise ValueError(f"timeout must be at least 1 second, got {self.timeout}")
        if not 0 <= self.max_retries <= 5:
            raise ValueError(f"max_retries must be between 0 and 5, got {self.max_retries}")


@dataclass(frozen=True)
class UIConfig:
    default_tone: str = Tone.DEFAULT.value
    default_language: str = DEFAULT_TRANSLATE_LANGUAGE
    max_input_chars: int = 10000

    def __post_init__(self) -> None:
        if self.default_tone not in {t.value for t in Tone}:
            raise ValueError(f"default_tone must be one of {[t.value for t in Tone]}, got {self.default_tone!r}")
        if self.default_language not in TRANSLATE_LANGUAGES:
            raise ValueError(
                f"default_language must be one of {list(TRANSLATE_LANGUAGES)}, got {self.default_language!r}"
            )
        if self.max_input_chars < 1:
            raise ValueError(f"max_input_chars must be positive, got {self.max_input_chars}")


@dataclass(frozen=True)
class AppConfig:
    chat: ChatConfig = field(default_factory=ChatConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        chat=ChatConfig(**raw.get("chat", {})),
        ui=UIConfig(**raw.get("ui", {})),
    )


def resolve_api_key(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the API credential from the environment, or None if unset."""
    env = os.environ if environ is None else environ
    for name in API_KEY_ENV_VARS:
        value = env.get(name, "").strip()
        if value:
            return value
    return None
