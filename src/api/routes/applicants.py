"""Applicant listing route."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_user_repo
from api.models import ApplicantResponse
from port.user_repository import UserRepository
from services import profile_service
from services.input_guard import generic_error_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applicants", tags=["applicants"])


@router.get("", response_model=list[ApplicantResponse])
async def list_applicants(repo: UserRepository = Depends(get_user_repo)):
    """List applicants without credentials."""
    try:
        users = profile_service.list_applicants(repo)
    except Exception as e:
        logger.error("Error retrieving applicants", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=generic_error_message("retrieving applicants"),
        )

    return [
        ApplicantResponse(
            id=u.id,
            first_name=u.first_name,
            last_name=u.last_name,
            location=u.location,
            email=u.email,
        )
        for u in users
    ]
