"""Usage figures reported by a chat-completion call."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LLMCallResult:
    """Token counts for one cover letter generation.

    ``provider`` is the prefix of the model string (``"openai"`` for
    ``"openai/gemma3:1b"``) when one can be derived.
    """
    model: str
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    provider: str | None = None
