"""Bearer token authorization for route handlers."""

import logging
from typing import Optional

from fastapi import Depends, Header, Request, status
from fastapi.responses import JSONResponse

from api.dependencies import get_token_service
from services.token_service import TokenService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
UNAUTHORIZED_MESSAGE = "Valid authorization token required"


class UnauthorizedError(Exception):
    """Request carried no usable bearer token."""


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer <token>`` header value.

    The scheme is matched exactly (case and single space), as clients send it.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


def get_current_user_id(
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> int:
    """Resolve the caller's user id from the bearer token. Raises UnauthorizedError otherwise."""
    token = extract_bearer_token(authorization)
    if not token:
        raise UnauthorizedError()

    user_id = tokens.extract_user_id(token)
    if user_id is None:
        logger.info("Rejected request with invalid bearer token")
        raise UnauthorizedError()
    return user_id


async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"success": False, "message": UNAUTHORIZED_MESSAGE},
        headers={"WWW-Authenticate": "Bearer"},
    )
