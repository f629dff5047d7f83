"""In-memory implementation of JobSourcePort for testing."""

from domain.model.job import Job


class FakeJobSource:
    def __init__(self, jobs: list[Job] | None = None, error: Exception | None = None):
        self.jobs = jobs or []
        self.error = error
        self.searches: list[tuple[str, str]] = []

    async def search(self, keywords: str, location: str) -> list[Job]:
        self.searches.append((keywords, location))
        if self.error:
            raise self.error
        return list(self.jobs)
