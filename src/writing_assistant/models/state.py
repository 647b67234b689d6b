"""Request state record and the result of a single action."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestState:
    """What the UI shows for the current interaction cycle."""

    input_text: str = ""
    output_text: str = ""
    loading: bool = False
    error: str | None = None

    @property
    def can_submit(self) -> bool:
        """Action buttons are enabled only with input and no request in flight."""
        return bool(self.input_text) and not self.loading


@dataclass(frozen=True)
class Success:
    text: str


@dataclass(frozen=True)
class Failure:
    message: str


ActionResult = Success | Failure
