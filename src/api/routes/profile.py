"""Profile routes for the authenticated applicant."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_user_repo
from api.models import MessageResponse, ProfileResponse, UpdateProfileRequest
from api.security import get_current_user_id
from domain.model.errors import NotFoundError
from domain.model.user import ProfileUpdate, User
from port.user_repository import UserRepository
from services import profile_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


def _to_response(user: User) -> ProfileResponse:
    return ProfileResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        full_name=user.full_name,
        email=user.email,
        location=user.location,
        job_title=user.job_title,
        about_me=user.about_me,
        resume_file_url=user.resume_file_url,
        job_preferences=user.job_preferences,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.get("", response_model=ProfileResponse)
async def get_profile(
    user_id: int = Depends(get_current_user_id),
    repo: UserRepository = Depends(get_user_repo),
):
    try:
        user = profile_service.get_profile(repo, user_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return _to_response(user)


@router.put("", response_model=MessageResponse)
async def update_profile(
    request: UpdateProfileRequest,
    user_id: int = Depends(get_current_user_id),
    repo: UserRepository = Depends(get_user_repo),
):
    """Update the caller's profile. Email and password cannot be changed here."""
    changes = ProfileUpdate(
        first_name=request.first_name,
        last_name=request.last_name,
        location=request.location,
        job_title=request.job_title,
        about_me=request.about_me,
        resume_file_url=request.resume_file_url,
        job_preferences=request.job_preferences,
    )
    try:
        profile_service.update_profile(repo, user_id, changes)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    logger.info("Profile updated via API", extra={"userId": user_id})
    return MessageResponse(success=True, message="Profile updated successfully")
