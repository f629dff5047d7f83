"""In-memory implementation of JobRepository for testing."""

from dataclasses import replace

from domain.model.job import Job


class FakeJobRepository:
    def __init__(self, jobs: list[Job] | None = None):
        self.store: dict[int, Job] = {}
        self._next_id = 1
        for job in jobs or []:
            self.add_if_new(job)

    def list_jobs(self) -> list[Job]:
        return [self.store[k] for k in sorted(self.store, reverse=True)]

    def get_by_id(self, job_id: int) -> Job | None:
        return self.store.get(job_id)

    def add_if_new(self, job: Job) -> bool:
        if any(j.link == job.link for j in self.store.values()):
            return False
        job_id = self._next_id
        self._next_id += 1
        self.store[job_id] = replace(job, id=job_id)
        return True
