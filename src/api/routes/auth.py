"""Authentication routes (register, login)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from api.dependencies import get_token_service, get_user_repo
from api.models import AuthResponse, LoginRequest, RegisterRequest, UserSummaryResponse
from domain.model.auth import AuthResult
from port.user_repository import UserRepository
from services import auth_service
from services.token_service import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _to_response(result: AuthResult) -> AuthResponse:
    user = None
    if result.user:
        user = UserSummaryResponse(
            id=result.user.id,
            first_name=result.user.first_name,
            last_name=result.user.last_name,
            email=result.user.email,
        )
    return AuthResponse(success=result.success, message=result.message, token=result.token, user=user)


def _failure(status_code: int, result: AuthResult) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": result.message},
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    repo: UserRepository = Depends(get_user_repo),
    tokens: TokenService = Depends(get_token_service),
):
    """Register a new user.

    Returns 201 with a token, 409 with ``{success: false, message}`` when
    registration is refused, and 400 when a field is blank.
    """
    if not all(v.strip() for v in (request.first_name, request.last_name, request.email, request.password)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="All fields are required")

    # bcrypt is CPU-bound; keep it off the event loop
    result = await run_in_threadpool(
        auth_service.register,
        repo,
        tokens,
        request.first_name.strip(),
        request.last_name.strip(),
        request.email,
        request.password,
    )
    if not result.success:
        return _failure(status.HTTP_409_CONFLICT, result)
    return _to_response(result)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    tokens: TokenService = Depends(get_token_service),
):
    """Login user and return a bearer token. 401 with a generic message on failure."""
    result = await run_in_threadpool(auth_service.login, repo, tokens, request.email, request.password)
    if not result.success:
        return _failure(status.HTTP_401_UNAUTHORIZED, result)
    return _to_response(result)
