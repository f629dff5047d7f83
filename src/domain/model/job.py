"""Job listing domain model."""

from dataclasses import dataclass


@dataclass
class Job:
    """A scraped job posting. `link` uniquely identifies a posting across sources."""
    title: str
    link: str
    id: int | None = None
    location: str | None = None
    snippet: str | None = None
    salary: str | None = None
    source: str | None = None
    updated: str | None = None
    job_type: str | None = None

    @classmethod
    def from_jooble(cls, item: dict) -> 'Job | None':
        """Build a Job from a Jooble API result item. Returns None without title or link."""
        title = (item.get('title') or '').strip()
        link = (item.get('link') or '').strip()
        if not title or not link:
            return None

        return cls(
            title=title[:100],
            link=link[:500],
            location=item.get('location') or None,
            snippet=item.get('snippet') or None,
            salary=item.get('salary') or None,
            source=item.get('source') or None,
            updated=item.get('updated') or None,
            job_type=item.get('type') or None,
        )
