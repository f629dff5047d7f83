"""LiteLLM adapter: implements LLMPort against any OpenAI-compatible endpoint.

The default model string ``openai/gemma3:1b`` together with ``LLM_API_BASE``
points LiteLLM at a local Ollama or llama.cpp server speaking the OpenAI
chat API.
"""

import logging

import litellm
from litellm import acompletion

from domain.model.llm import LLMCallResult
from port.llm import LLMAuthError, LLMError, LLMRateLimitError, LLMTimeoutError
from utils.config import LLMSettings

litellm.suppress_debug_info = True
logging.getLogger("LiteLLM").setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)


def provider_of(model: str) -> str | None:
    """``"openai/gemma3:1b"`` -> ``"openai"``; bare model names have no provider."""
    prefix, sep, _ = model.partition("/")
    return prefix if sep else None


class LiteLLMAdapter:
    def __init__(self, settings: LLMSettings):
        self.settings = settings

    async def call(
        self,
        messages: list[dict[str, str]],
        temperature: float = 0.7,
        **kwargs,
    ) -> tuple[str, LLMCallResult]:
        """Run one chat completion and return the stripped reply with its token usage.

        Raises:
            ValueError: ``messages`` is empty.
            LLMError: provider failure (timeout, auth, rate limit subclasses).
            RuntimeError: the provider answered with no text.
        """
        if not messages:
            raise ValueError("messages list cannot be empty")

        model = self.settings.model
        if self.settings.api_base:
            kwargs.setdefault("api_base", self.settings.api_base)
        if self.settings.api_key:
            kwargs.setdefault("api_key", self.settings.api_key)

        try:
            response = await acompletion(
                model=model,
                messages=messages,
                temperature=temperature,
                timeout=self.settings.timeout_seconds,
                **kwargs,
            )
        except litellm.Timeout as e:
            raise LLMTimeoutError(str(e)) from e
        except litellm.AuthenticationError as e:
            raise LLMAuthError(str(e)) from e
        except litellm.RateLimitError as e:
            raise LLMRateLimitError(str(e)) from e
        except (litellm.APIError, litellm.APIConnectionError) as e:
            raise LLMError(str(e)) from e

        content = ""
        if response.choices:
            message = response.choices[0].message
            if message and message.content:
                content = message.content.strip()

        if not content:
            logger.error("Empty completion from LLM", extra={
                "model": model,
                "response_id": getattr(response, "id", None),
            })
            raise RuntimeError("No content returned from LLM")

        usage = getattr(response, "usage", None)
        stats = LLMCallResult(
            model=model,
            prompt_tokens=usage.prompt_tokens if usage else 0,
            completion_tokens=usage.completion_tokens if usage else 0,
            total_tokens=usage.total_tokens if usage else 0,
            provider=provider_of(model),
        )
        logger.debug("Completion received", extra={
            "model": model, "total_tokens": stats.total_tokens,
        })
        return content, stats
