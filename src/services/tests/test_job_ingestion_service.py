"""Tests for ingest_jobs with fake job source and repository."""

import unittest

from adapter.fake.job_repository import FakeJobRepository
from adapter.fake.job_source import FakeJobSource
from domain.model.job import Job
from port.job_source import JobSourceError
from services.job_ingestion_service import ingest_jobs


class TestIngestJobs(unittest.IsolatedAsyncioTestCase):

    async def test_inserts_only_unknown_links(self):
        repo = FakeJobRepository([Job(title="Old", link="https://jobs/1")])
        source = FakeJobSource([
            Job(title="Old again", link="https://jobs/1"),
            Job(title="New", link="https://jobs/2"),
            Job(title="New dup", link="https://jobs/2"),
        ])

        inserted = await ingest_jobs(source, repo, "python", "Berlin")

        self.assertEqual(inserted, 1)
        self.assertEqual([j.title for j in repo.list_jobs()], ["New", "Old"])
        self.assertEqual(source.searches, [("python", "Berlin")])

    async def test_source_errors_propagate(self):
        source = FakeJobSource(error=JobSourceError("down"))
        with self.assertRaises(JobSourceError):
            await ingest_jobs(source, FakeJobRepository(), "python", "Berlin")


if __name__ == '__main__':
    unittest.main()
