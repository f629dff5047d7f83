"""Blob storage port: persistence for cover letter drafts."""

from typing import Protocol

from domain.model.cover_letter import CoverLetterDraft


class BlobStorageError(Exception):
    """Blob storage backend is unavailable or rejected the request."""


class BlobStoragePort(Protocol):
    def upload_draft(self, draft: CoverLetterDraft) -> str:
        """Store a draft as JSON under a new unique name and return that name."""
        ...

    def list_blobs(self) -> list[str]: ...

    def download(self, blob_name: str) -> str | None:
        """Return blob content, or None if the blob does not exist."""
        ...

    def delete(self, blob_name: str) -> bool:
        """Delete a blob. Return False if it did not exist."""
        ...

    def exists(self, blob_name: str) -> bool: ...
