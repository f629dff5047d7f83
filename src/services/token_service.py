"""Bearer token issuing and validation (HS256 JWT)."""

import logging
import uuid
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from utils.config import AuthSettings

logger = logging.getLogger(__name__)


class TokenService:
    """Issues and validates signed bearer tokens.

    Tokens are stateless: validity is decided by signature, issuer and
    expiry alone. There is no revocation.
    """

    def __init__(self, settings: AuthSettings):
        self._settings = settings

    def issue(self, user_id: int, email: str, first_name: str, last_name: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "userId": str(user_id),
            "email": email,
            "firstName": first_name,
            "lastName": last_name,
            "name": f"{first_name} {last_name}",
            "iat": now,
            "exp": now + timedelta(days=self._settings.jwt_expiration_days),
            "iss": self._settings.jwt_issuer,
            # Distinct per issue, even within the same second
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._settings.jwt_secret, algorithm=self._settings.jwt_algorithm)

    def _decode(self, token: str) -> dict:
        # python-jose skips exp, iat and iss checks when the claim is absent, so require them.
        # No leeway is applied unless asked, so expiry is exact.
        return jwt.decode(
            token,
            self._settings.jwt_secret,
            algorithms=[self._settings.jwt_algorithm],
            issuer=self._settings.jwt_issuer,
            options={"verify_aud": False, "require_exp": True, "require_iat": True, "require_iss": True},
        )

    def validate(self, token: str) -> bool:
        if not token:
            return False
        try:
            self._decode(token)
            return True
        except JWTError as e:
            logger.debug("JWT verification failed", extra={"error": str(e)})
            return False

    def extract_user_id(self, token: str) -> int | None:
        """Return the userId claim of a valid token, or None. Never raises."""
        if not token:
            return None
        try:
            payload = self._decode(token)
        except JWTError as e:
            logger.debug("JWT verification failed", extra={"error": str(e)})
            return None

        try:
            return int(payload.get("userId"))
        except (TypeError, ValueError):
            return None
