"""Profile service: reading and editing applicant profiles."""

import logging

from domain.model.errors import NotFoundError
from domain.model.user import ProfileUpdate, User
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def get_profile(repo: UserRepository, user_id: int) -> User:
    """Raises NotFoundError if the user does not exist."""
    user = repo.get_by_id(user_id)
    if not user:
        raise NotFoundError(f"User {user_id} not found")
    return user


def update_profile(repo: UserRepository, user_id: int, changes: ProfileUpdate) -> User:
    """Apply profile changes. Email and password hash are never touched.

    Raises:
        NotFoundError: user does not exist
    """
    user = repo.update_profile(user_id, changes)
    if not user:
        raise NotFoundError(f"User {user_id} not found")
    return user


def list_applicants(repo: UserRepository) -> list[User]:
    return repo.list_all()
