"""LLM port: chat-completion calls used to write cover letters."""

from typing import Protocol

from domain.model.llm import LLMCallResult


class LLMError(Exception):
    """Provider call failed."""


class LLMTimeoutError(LLMError):
    """No answer within the configured timeout."""


class LLMRateLimitError(LLMError):
    """Provider throttled the request."""


class LLMAuthError(LLMError):
    """Provider rejected the API key."""


class LLMPort(Protocol):
    async def call(
        self,
        messages: list[dict[str, str]],
        temperature: float = 0.7,
        **kwargs,
    ) -> tuple[str, LLMCallResult]:
        """Send chat messages and return (content, usage)."""
        ...
