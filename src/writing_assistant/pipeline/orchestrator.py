"""Request orchestrator - drives one action from button press to displayed result."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from writing_assistant.clients.chat_client import ChatAPIError, ChatClient
from writing_assistant.models.options import DEFAULT_TRANSLATE_LANGUAGE, Action, Tone
from writing_assistant.models.state import ActionResult, Failure, RequestState, Success
from writing_assistant.pipeline.prompt_builder import build_prompt

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "An error occurred. Please try again."


def begin(state: RequestState) -> RequestState:
    """Enter the busy state, clearing the previous output and error."""
    return replace(state, output_text="", error=None, loading=True)


def complete(state: RequestState, result: ActionResult) -> RequestState:
    """Leave the busy state with either output or an error message."""
    if isinstance(result, Success):
        return replace(state, output_text=result.text, error=None, loading=False)
    return replace(state, output_text="", error=result.message, loading=False)


class RequestOrchestrator:
    """Runs an action against the chat endpoint and reduces the result into state.

    Overlapping runs are rejected: while a request is pending, ``run`` returns
    the state it was given and does not call the endpoint.
    """

    def __init__(self, client: ChatClient):
        self.client = client
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def execute(
        self,
        action: Action | str,
        text: str,
        tone: Tone | str = Tone.DEFAULT,
        target_language: str = DEFAULT_TRANSLATE_LANGUAGE,
    ) -> ActionResult:
        """Send one prompt and return Success or Failure; never raises ChatAPIError."""
        prompt = build_prompt(action, text, tone, target_language)
        try:
            response = await self.client.complete(prompt)
        except ChatAPIError as exc:
            logger.debug("Action %s failed: %s", getattr(action, "value", action), exc)
            return Failure(exc.message or FALLBACK_ERROR_MESSAGE)
        return Success(response.text.strip())

    async def run(
        self,
        state: RequestState,
        action: Action | str,
        *,
        tone: Tone | str = Tone.DEFAULT,
        target_language: str = DEFAULT_TRANSLATE_LANGUAGE,
        on_state: Callable[[RequestState], None] | None = None,
    ) -> RequestState:
        """Run an action for ``state.input_text`` and return the resulting state.

        Args:
            state: Current UI state; its input_text is what gets transformed.
            action: rewrite, summarize or translate.
            tone: Rewrite tone.
            target_language: Translate target code.
            on_state: Optional callback receiving the busy state and the final state.
        """
        if not state.can_submit or self._in_flight:
            logger.debug(
                "Ignoring %s: input_empty=%s loading=%s in_flight=%s",
                getattr(action, "value", action),
                not state.input_text,
                state.loading,
                self._in_flight,
            )
            return state

        self._in_flight = True
        try:
            busy = begin(state)
            if on_state:
                on_state(busy)
            result = await self.execute(action, state.input_text, tone, target_language)
        finally:
            self._in_flight = False

        final = complete(busy, result)
        if on_state:
            on_state(final)
        return final
