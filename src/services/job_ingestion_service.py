"""Job ingestion: copy search results from a job source into the job table."""

import logging

from port.job_repository import JobRepository
from port.job_source import JobSourcePort

logger = logging.getLogger(__name__)


async def ingest_jobs(source: JobSourcePort, repo: JobRepository, keywords: str, location: str) -> int:
    """Store postings whose link is not yet known. Returns the number inserted.

    Raises:
        JobSourceError: the provider could not be queried
    """
    jobs = await source.search(keywords, location)

    inserted = 0
    for job in jobs:
        if repo.add_if_new(job):
            inserted += 1

    logger.info("Job ingestion finished", extra={
        "keywords": keywords,
        "location": location,
        "fetched": len(jobs),
        "inserted": inserted,
    })
    return inserted
