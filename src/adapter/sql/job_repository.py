"""SQLAlchemy implementation of JobRepository."""

from logging import getLogger

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from adapter.sql.models import JobRow
from domain.model.job import Job

logger = getLogger(__name__)


class SqlJobRepository:
    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def _to_domain(self, row: JobRow) -> Job:
        return Job(
            id=row.id,
            title=row.title,
            location=row.location,
            snippet=row.snippet,
            salary=row.salary,
            source=row.source,
            link=row.link,
            updated=row.updated,
            job_type=row.job_type,
        )

    def list_jobs(self) -> list[Job]:
        try:
            with self._session_factory() as session:
                rows = session.scalars(select(JobRow).order_by(JobRow.id.desc())).all()
                return [self._to_domain(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error("Failed to list jobs", extra={"error": str(e)})
            raise

    def get_by_id(self, job_id: int) -> Job | None:
        try:
            with self._session_factory() as session:
                row = session.get(JobRow, job_id)
                return self._to_domain(row) if row else None
        except SQLAlchemyError as e:
            logger.error("Failed to get job", extra={"jobId": job_id, "error": str(e)})
            raise

    def add_if_new(self, job: Job) -> bool:
        with self._session_factory() as session:
            existing = session.scalars(select(JobRow.id).where(JobRow.link == job.link)).first()
            if existing is not None:
                return False

            session.add(JobRow(
                title=job.title,
                location=job.location,
                snippet=job.snippet,
                salary=job.salary,
                source=job.source,
                link=job.link,
                updated=job.updated,
                job_type=job.job_type,
            ))
            try:
                session.commit()
            except IntegrityError:
                # Another writer stored the same link first
                session.rollback()
                return False
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Failed to insert job", extra={"link": job.link, "error": str(e)})
                raise
            return True
