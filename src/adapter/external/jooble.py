"""Jooble job search API adapter.

Implements JobSourcePort by POSTing a keyword/location query to Jooble.

API Documentation: https://jooble.org/api/about
"""

import logging

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from domain.model.job import Job
from port.job_source import JobSourceError

logger = logging.getLogger(__name__)

JOOBLE_API_BASE_URL = "https://jooble.org/api"
API_TIMEOUT_SECONDS = 15.0


class JoobleJobSource:
    def __init__(self, api_key: str, transport: httpx.AsyncBaseTransport | None = None):
        if not api_key:
            raise ValueError("JOOBLE_API_KEY is required for job search")
        self._api_key = api_key
        self._transport = transport

    async def search(self, keywords: str, location: str) -> list[Job]:
        """Search Jooble and return the postings that carry a title and link.

        Raises:
            JobSourceError: If the API is unreachable or answers with an error status.
        """
        url = f"{JOOBLE_API_BASE_URL}/{self._api_key}"
        payload = {"keywords": keywords, "location": location}

        try:
            async with httpx.AsyncClient(timeout=API_TIMEOUT_SECONDS, transport=self._transport) as client:
                response = await _post_with_retry(client, url, payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Jooble API HTTP error", extra={
                "keywords": keywords, "status_code": e.response.status_code,
            })
            raise JobSourceError(f"Jooble returned HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.warning("Jooble API request error", extra={
                "keywords": keywords, "error_type": type(e).__name__,
            })
            raise JobSourceError("Jooble request failed") from e
        except ValueError as e:
            raise JobSourceError("Jooble returned invalid JSON") from e

        items = data.get("jobs", []) if isinstance(data, dict) else []
        jobs = [job for job in (Job.from_jooble(item) for item in items) if job]

        logger.info("Jooble search completed", extra={
            "keywords": keywords, "location": location,
            "total": data.get("totalCount") if isinstance(data, dict) else None,
            "returned": len(jobs),
        })
        return jobs


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _post_with_retry(client: httpx.AsyncClient, url: str, payload: dict) -> httpx.Response:
    """POST with automatic retry on transient failures."""
    return await client.post(url, json=payload)
