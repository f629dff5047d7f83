"""Cover letter draft and outgoing email models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class CoverLetterDraft:
    """A cover letter persisted to blob storage, waiting to be emailed."""
    email: str
    name: str
    cover_letter: str
    job_title: str | None = None
    company_name: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            'email': self.email,
            'name': self.name,
            'coverLetter': self.cover_letter,
            'jobTitle': self.job_title,
            'companyName': self.company_name,
            'createdAt': self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CoverLetterDraft':
        """Parse a stored draft. Missing fields become empty strings so callers can validate."""
        created_at = data.get('createdAt')
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at.replace('Z', '+00:00'))
        return cls(
            email=data.get('email') or '',
            name=data.get('name') or '',
            cover_letter=data.get('coverLetter') or '',
            job_title=data.get('jobTitle'),
            company_name=data.get('companyName'),
            created_at=created_at or datetime.now(timezone.utc),
        )

    def is_complete(self) -> bool:
        return bool(self.email and self.name and self.cover_letter)


@dataclass(frozen=True)
class EmailMessage:
    """A fully composed plain-text email ready for a sender adapter."""
    to_email: str
    to_name: str
    subject: str
    body: str
