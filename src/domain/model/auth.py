"""Authentication result value objects."""

from dataclasses import dataclass

from domain.model.user import User


@dataclass(frozen=True)
class UserSummary:
    """Public identity of a user. Never carries the password hash."""
    id: int
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> 'UserSummary':
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a register or login attempt. Transient, never persisted."""
    success: bool
    message: str = ""
    token: str | None = None
    user: UserSummary | None = None

    @classmethod
    def failure(cls, message: str) -> 'AuthResult':
        return cls(success=False, message=message)
