"""Command-line job ingestion: search Jooble and store new postings.

Usage:
    python -m worker.ingest_jobs --keywords "python developer" --location "Remote"
"""

import argparse
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

from adapter.external.jooble import JoobleJobSource
from adapter.sql.connection import create_db_engine, create_session_factory, init_schema
from adapter.sql.job_repository import SqlJobRepository
from port.job_source import JobSourceError
from services.job_ingestion_service import ingest_jobs
from utils.config import DatabaseSettings
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import job postings from Jooble")
    parser.add_argument("--keywords", required=True, help="Search keywords, e.g. 'data analyst'")
    parser.add_argument("--location", required=True, help="Search location, e.g. 'Berlin'")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    setup_structured_logging()
    args = _parse_args(argv)

    api_key = (os.getenv("JOOBLE_API_KEY") or "").strip()
    if not api_key:
        logger.error("JOOBLE_API_KEY is not set")
        return 1

    engine = create_db_engine(DatabaseSettings.from_env().url)
    init_schema(engine)
    repo = SqlJobRepository(create_session_factory(engine))

    try:
        inserted = asyncio.run(ingest_jobs(JoobleJobSource(api_key), repo, args.keywords, args.location))
    except JobSourceError as e:
        logger.error("Job ingestion failed", extra={"error": str(e)})
        return 1

    print(f"Inserted {inserted} new job(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
