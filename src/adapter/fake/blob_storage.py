"""In-memory implementation of BlobStoragePort for testing."""

import json
import uuid

from domain.model.cover_letter import CoverLetterDraft


class FakeBlobStorage:
    def __init__(self):
        self.blobs: dict[str, str] = {}

    def upload_draft(self, draft: CoverLetterDraft) -> str:
        blob_name = f"{uuid.uuid4()}.json"
        self.blobs[blob_name] = json.dumps(draft.to_dict())
        return blob_name

    def list_blobs(self) -> list[str]:
        return sorted(self.blobs)

    def download(self, blob_name: str) -> str | None:
        return self.blobs.get(blob_name)

    def delete(self, blob_name: str) -> bool:
        return self.blobs.pop(blob_name, None) is not None

    def exists(self, blob_name: str) -> bool:
        return blob_name in self.blobs
