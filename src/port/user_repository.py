from typing import Protocol

from domain.model.user import ProfileUpdate, User


class UserRepository(Protocol):
    """Protocol defining the interface for applicant account storage.

    Emails are stored and matched in normalized (trimmed, lowercase) form.
    """
    def create(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
    ) -> int:
        """Insert a new user and return its generated id.

        Raises DuplicateError when the email is already taken.
        """
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def get_by_id(self, user_id: int) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def list_all(self) -> list[User]:
        """Return all users ordered by id."""
        ...

    def update_profile(self, user_id: int, changes: ProfileUpdate) -> User | None:
        """Apply profile changes. Return the updated User or None if not found."""
        ...
