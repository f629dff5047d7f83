"""In-memory implementation of LLMPort for testing."""

from domain.model.llm import LLMCallResult


class FakeLLMAdapter:
    """Fake LLM adapter that returns a preconfigured response or raises a preconfigured error."""

    def __init__(
        self,
        response: str = "I am excited to apply.",
        error: Exception | None = None,
    ):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def call(
        self,
        messages: list[dict[str, str]],
        temperature: float = 0.7,
        **kwargs,
    ) -> tuple[str, LLMCallResult]:
        self.calls.append({
            "messages": messages,
            "temperature": temperature,
            **kwargs,
        })
        if self.error:
            raise self.error
        stats = LLMCallResult(
            model="fake-model",
            prompt_tokens=10,
            completion_tokens=5,
            total_tokens=15,
        )
        return self.response, stats
