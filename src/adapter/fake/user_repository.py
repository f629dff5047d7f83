"""In-memory implementation of UserRepository for testing."""

from dataclasses import replace
from datetime import datetime, timezone

from domain.model.errors import DuplicateError
from domain.model.user import ProfileUpdate, User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[int, User] = {}
        self._next_id = 1

    # ── write operations ─────────────────────────────────────

    def create(self, first_name: str, last_name: str, email: str, password_hash: str) -> int:
        if any(u.email == email for u in self.store.values()):
            raise DuplicateError(f"Email already registered: {email}")

        user_id = self._next_id
        self._next_id += 1
        now = datetime.now(timezone.utc)
        self.store[user_id] = User(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        return user_id

    def update_profile(self, user_id: int, changes: ProfileUpdate) -> User | None:
        user = self.store.get(user_id)
        if not user:
            return None

        updated = replace(
            user,
            first_name=changes.first_name or user.first_name,
            last_name=changes.last_name or user.last_name,
            location=changes.location,
            job_title=changes.job_title,
            about_me=changes.about_me,
            resume_file_url=changes.resume_file_url,
            job_preferences=changes.job_preferences,
            updated_at=datetime.now(timezone.utc),
        )
        self.store[user_id] = updated
        return updated

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: int) -> User | None:
        return self.store.get(user_id)

    def list_all(self) -> list[User]:
        return [self.store[k] for k in sorted(self.store)]
