"""Job source port: external job search provider."""

from typing import Protocol

from domain.model.job import Job


class JobSourceError(Exception):
    """Job provider could not be reached or returned an error."""


class JobSourcePort(Protocol):
    async def search(self, keywords: str, location: str) -> list[Job]: ...
