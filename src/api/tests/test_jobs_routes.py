"""Route tests for /jobs."""

import unittest

from fastapi.testclient import TestClient

from adapter.fake.job_repository import FakeJobRepository
from adapter.fake.job_source import FakeJobSource
from api.dependencies import get_job_repo, get_job_source
from api.main import app
from domain.model.job import Job
from port.job_source import JobSourceError


class TestJobsRoutes(unittest.TestCase):

    def setUp(self):
        self.repo = FakeJobRepository([
            Job(title="Data Analyst", link="https://jobs.example.com/1", location="Austin"),
            Job(title="Barista", link="https://jobs.example.com/2", job_type="Part-time"),
        ])
        self.source = FakeJobSource([Job(title="Nurse", link="https://jobs.example.com/3")])
        app.dependency_overrides[get_job_repo] = lambda: self.repo
        app.dependency_overrides[get_job_source] = lambda: self.source
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_list_jobs_newest_first(self):
        response = self.client.get("/jobs")

        self.assertEqual(response.status_code, 200)
        jobs = response.json()
        self.assertEqual([j["id"] for j in jobs], [2, 1])
        self.assertEqual(jobs[0]["jobType"], "Part-time")

    def test_get_job_by_id(self):
        response = self.client.get("/jobs/1")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["title"], "Data Analyst")

    def test_unknown_job_is_404(self):
        response = self.client.get("/jobs/99")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "Job with ID 99 not found.")

    def test_search_passes_trimmed_query(self):
        response = self.client.post("/jobs/search", json={"keywords": " nurse ", "location": "Austin"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()[0]["title"], "Nurse")
        self.assertEqual(self.source.searches, [("nurse", "Austin")])

    def test_search_requires_keywords_and_location(self):
        response = self.client.post("/jobs/search", json={"keywords": "nurse"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.source.searches, [])

    def test_search_provider_failure_is_502(self):
        self.source.error = JobSourceError("Jooble returned HTTP 500")

        response = self.client.post("/jobs/search", json={"keywords": "nurse", "location": "Austin"})

        self.assertEqual(response.status_code, 502)


if __name__ == '__main__':
    unittest.main()
