from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    """Domain model representing an applicant account."""
    id: int
    first_name: str
    last_name: str
    email: str
    password_hash: str | None = None
    location: str | None = None
    job_title: str | None = None
    about_me: str | None = None
    resume_file_url: str | None = None
    job_preferences: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class ProfileUpdate:
    """Profile fields a user may change. Email and password are not editable here.

    first_name/last_name keep the stored value when None; the remaining
    fields are replaced as given (None clears them).
    """
    first_name: str | None = None
    last_name: str | None = None
    location: str | None = None
    job_title: str | None = None
    about_me: str | None = None
    resume_file_url: str | None = None
    job_preferences: str | None = None
