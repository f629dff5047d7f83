"""Tests for JoobleJobSource using httpx.MockTransport."""

import json
import unittest

import httpx

from adapter.external.jooble import JoobleJobSource
from port.job_source import JobSourceError


def _transport(status=200, payload=None, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status, json=payload if payload is not None else {})
    return httpx.MockTransport(handler)


class TestJoobleJobSource(unittest.IsolatedAsyncioTestCase):

    async def test_search_posts_query_and_maps_results(self):
        seen = []
        payload = {
            "totalCount": 3,
            "jobs": [
                {"title": "Data Analyst", "link": "https://jooble.org/1", "location": "Berlin",
                 "snippet": "SQL and Python", "salary": "50k", "source": "jooble", "type": "Full-time",
                 "updated": "2024-01-01T00:00:00"},
                {"title": "", "link": "https://jooble.org/2"},
                {"title": "No link"},
            ],
        }
        source = JoobleJobSource("api-key", transport=_transport(payload=payload, seen=seen))

        jobs = await source.search("analyst", "Berlin")

        self.assertEqual(len(jobs), 1)
        self.assertEqual(jobs[0].title, "Data Analyst")
        self.assertEqual(jobs[0].job_type, "Full-time")
        self.assertEqual(str(seen[0].url), "https://jooble.org/api/api-key")
        self.assertEqual(json.loads(seen[0].content), {"keywords": "analyst", "location": "Berlin"})

    async def test_http_error_raises_job_source_error(self):
        source = JoobleJobSource("api-key", transport=_transport(status=403))
        with self.assertRaises(JobSourceError):
            await source.search("analyst", "Berlin")

    async def test_empty_response(self):
        source = JoobleJobSource("api-key", transport=_transport(payload={"totalCount": 0}))
        self.assertEqual(await source.search("analyst", "Berlin"), [])

    def test_requires_api_key(self):
        with self.assertRaises(ValueError):
            JoobleJobSource("")


if __name__ == '__main__':
    unittest.main()
