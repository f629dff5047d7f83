"""Port definition for job listing storage."""

from typing import Protocol

from domain.model.job import Job


class JobRepository(Protocol):
    def list_jobs(self) -> list[Job]:
        """Return all jobs, newest (highest id) first."""
        ...

    def get_by_id(self, job_id: int) -> Job | None: ...

    def add_if_new(self, job: Job) -> bool:
        """Insert job unless one with the same link exists. Return True if inserted."""
        ...
