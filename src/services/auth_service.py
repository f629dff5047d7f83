"""Auth service: registration and login business logic.

Pure business logic with no HTTP dependencies. Both operations report
their outcome as an AuthResult and never raise; unexpected failures are
logged here and surfaced to callers only as a generic message.
"""

import logging
import re

from domain.model.auth import AuthResult, UserSummary
from domain.model.errors import DuplicateError
from port.user_repository import UserRepository
from services.passwords import hash_password, verify_password
from services.token_service import TokenService

logger = logging.getLogger(__name__)

EMAIL_ALREADY_REGISTERED = "Email already registered"
WEAK_PASSWORD = (
    "Password must be at least 8 characters with uppercase, lowercase, "
    "number, and special character"
)
ACCOUNT_CREATION_FAILED = "Failed to create account"
REGISTRATION_FAILED = "Registration failed"
REGISTRATION_SUCCESSFUL = "Registration successful"
INVALID_CREDENTIALS = "Invalid credentials"
LOGIN_FAILED = "Login failed"
LOGIN_SUCCESSFUL = "Login successful"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def is_password_strong(password: str) -> bool:
    """At least 8 chars with an uppercase, a lowercase, a digit and a symbol."""
    if not password or len(password) < 8:
        return False
    return all([
        re.search(r"[A-Z]", password),
        re.search(r"[a-z]", password),
        re.search(r"[0-9]", password),
        re.search(r"[^A-Za-z0-9]", password),
    ])


def register(
    repo: UserRepository,
    tokens: TokenService,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
) -> AuthResult:
    """Create an account and issue a token for it."""
    email = normalize_email(email)
    try:
        if repo.get_by_email(email):
            return AuthResult.failure(EMAIL_ALREADY_REGISTERED)

        if not is_password_strong(password):
            return AuthResult.failure(WEAK_PASSWORD)

        try:
            user_id = repo.create(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=hash_password(password),
            )
        except DuplicateError:
            # Lost a race with a concurrent registration for the same email
            return AuthResult.failure(EMAIL_ALREADY_REGISTERED)

        if not user_id or user_id <= 0:
            return AuthResult.failure(ACCOUNT_CREATION_FAILED)

        token = tokens.issue(user_id, email, first_name, last_name)
        logger.info("User registered", extra={"userId": user_id, "email": email})
        return AuthResult(
            success=True,
            message=REGISTRATION_SUCCESSFUL,
            token=token,
            user=UserSummary(id=user_id, first_name=first_name, last_name=last_name, email=email),
        )
    except Exception as e:
        logger.error("Registration error", extra={"email": email, "error": str(e)}, exc_info=True)
        return AuthResult.failure(REGISTRATION_FAILED)


def login(repo: UserRepository, tokens: TokenService, email: str, password: str) -> AuthResult:
    """Verify credentials and issue a token.

    Unknown email and wrong password produce the same message so callers
    cannot tell which accounts exist.
    """
    email = normalize_email(email)
    try:
        user = repo.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.info("Login rejected", extra={"email": email})
            return AuthResult.failure(INVALID_CREDENTIALS)

        token = tokens.issue(user.id, user.email, user.first_name, user.last_name)
        logger.info("User logged in", extra={"userId": user.id})
        return AuthResult(
            success=True,
            message=LOGIN_SUCCESSFUL,
            token=token,
            user=UserSummary.from_user(user),
        )
    except Exception as e:
        logger.error("Login error", extra={"email": email, "error": str(e)}, exc_info=True)
        return AuthResult.failure(LOGIN_FAILED)
