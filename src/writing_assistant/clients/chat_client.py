"""Chat-completion API wrapper with async support and retry logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from writing_assistant.models.chat import ChatCompletion

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_SYSTEM_PROMPT = "You are a helpful AI writing assistant."
DEFAULT_TIMEOUT = 60.0


class ChatAPIError(Exception):
    """A chat-completion request failed.

    ``message`` is the upstream service's error message when the response
    carried one, otherwise None.
    """

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message or "chat completion request failed")
        self.message = message
        self.status_code = status_code


@dataclass
class ChatResponse:
    """Response from the chat endpoint including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class ChatClient:
    """Async chat-completion client, one HTTP connection per call."""

    def __init__(
        self,
        api_key: str | None,
        *,
        api_url: str = DEFAULT_API_URL,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 512,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key:
            raise ValueError("An API key is required to call the chat-completion endpoint")
        self._api_key = api_key
        self.api_url = api_url
        self.model = model
        self.max_tokens = max_tokens
        self.system_prompt = system_prompt
        self.timeout = timeout
        self.max_retries = max_retries
        self._transport = transport
        self._retry_wait = wait_exponential(min=1, max=10)
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def build_payload(self, prompt: str) -> dict:
        """Request body: fixed system instruction plus the user prompt."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": self.max_tokens,
        }

    async def _post(self, payload: dict) -> httpx.Response:
        kwargs: dict = {"timeout": self.timeout}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        async with httpx.AsyncClient(**kwargs) as client:
            return await client.post(self.api_url, json=payload, headers=self.headers)

    async def _call_api(self, payload: dict) -> httpx.Response:
        """POST the payload, retrying transport failures up to max_retries times."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=self._retry_wait,
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )
        return await retrying(self._post, payload)

    async def complete(self, prompt: str) -> ChatResponse:
        """Send a prompt and return the first choice's text with usage.

        Raises:
            ChatAPIError: on transport failure, a non-2xx status, or a body
                that is not a chat completion.
        """
        logger.debug("Chat call: model=%s", self.model)
        try:
            response = await self._call_api(self.build_payload(prompt))
        except httpx.HTTPError as exc:
            logger.error("Chat call failed", exc_info=True)
            raise ChatAPIError() from exc

        if response.is_error:
            message = extract_error_message(response)
            logger.error("Chat call returned HTTP %d: %s", response.status_code, message)
            raise ChatAPIError(message, status_code=response.status_code)

        try:
            completion = ChatCompletion.model_validate(response.json())
        except ValueError as exc:
            logger.error("Malformed chat completion body", exc_info=True)
            raise ChatAPIError(status_code=response.status_code) from exc

        input_tokens = completion.usage.prompt_tokens
        output_tokens = completion.usage.completion_tokens
        logger.debug("Chat response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((self.model, input_tokens, output_tokens))
        return ChatResponse(
            text=completion.first_content,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary


def extract_error_message(response: httpx.Response) -> str | None:
    """Pull ``error.message`` out of an error body, if it has one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None
