"""SQLAlchemy implementation of UserRepository."""

from datetime import datetime, timezone
from logging import getLogger

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from adapter.sql.models import ApplicantRow
from domain.model.errors import DuplicateError
from domain.model.user import ProfileUpdate, User

logger = getLogger(__name__)


class SqlUserRepository:
    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def _to_domain(self, row: ApplicantRow) -> User:
        return User(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            password_hash=row.password_hash,
            location=row.location,
            job_title=row.job_title,
            about_me=row.about_me,
            resume_file_url=row.resume_file_url,
            job_preferences=row.job_preferences,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def create(self, first_name: str, last_name: str, email: str, password_hash: str) -> int:
        """Insert a new applicant and return the generated id.

        Raises:
            DuplicateError: If the email is already registered.
        """
        now = datetime.now(timezone.utc)
        row = ApplicantRow(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        with self._session_factory() as session:
            try:
                session.add(row)
                session.commit()
            except IntegrityError as e:
                session.rollback()
                logger.warning("User creation failed: email already exists", extra={"email": email})
                raise DuplicateError(f"Email already registered: {email}") from e
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Failed to create user", extra={"email": email, "error": str(e)})
                raise

            logger.info("User created", extra={"userId": row.id, "email": email})
            return row.id

    def get_by_email(self, email: str) -> User | None:
        try:
            with self._session_factory() as session:
                row = session.scalars(
                    select(ApplicantRow).where(ApplicantRow.email == email)
                ).first()
                return self._to_domain(row) if row else None
        except SQLAlchemyError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            raise

    def get_by_id(self, user_id: int) -> User | None:
        try:
            with self._session_factory() as session:
                row = session.get(ApplicantRow, user_id)
                return self._to_domain(row) if row else None
        except SQLAlchemyError as e:
            logger.error("Failed to get user by id", extra={"userId": user_id, "error": str(e)})
            raise

    def list_all(self) -> list[User]:
        try:
            with self._session_factory() as session:
                rows = session.scalars(select(ApplicantRow).order_by(ApplicantRow.id)).all()
                return [self._to_domain(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error("Failed to list users", extra={"error": str(e)})
            raise

    def update_profile(self, user_id: int, changes: ProfileUpdate) -> User | None:
        with self._session_factory() as session:
            try:
                row = session.get(ApplicantRow, user_id)
                if row is None:
                    return None

                row.first_name = changes.first_name or row.first_name
                row.last_name = changes.last_name or row.last_name
                row.location = changes.location
                row.job_title = changes.job_title
                row.about_me = changes.about_me
                row.resume_file_url = changes.resume_file_url
                row.job_preferences = changes.job_preferences
                row.updated_at = datetime.now(timezone.utc)
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Failed to update profile", extra={"userId": user_id, "error": str(e)})
                raise

            logger.info("Profile updated", extra={"userId": user_id})
            return self._to_domain(row)
