"""Cover letter generation and draft routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import get_blob_storage, get_job_repo, get_llm_port, get_user_repo
from api.models import (
    CoverLetterFromJobRequest,
    CoverLetterFromJobResponse,
    CoverLetterResponse,
    GenerateCoverLetterRequest,
    SaveCoverLetterRequest,
    SaveCoverLetterResponse,
)
from api.security import get_current_user_id
from domain.model.cover_letter import CoverLetterDraft
from domain.model.errors import NotFoundError, ValidationError
from port.blob_storage import BlobStoragePort
from port.job_repository import JobRepository
from port.llm import LLMPort
from port.user_repository import UserRepository
from services import cover_letter_service
from services.input_guard import (
    MAX_FIELD_LENGTH,
    MAX_REQUEST_BODY_LENGTH,
    generic_error_message,
    is_valid_input,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cover-letters", tags=["cover-letters"])


async def guard_request_body(request: Request) -> None:
    """Reject oversized or script-like request bodies before they are parsed further."""
    body = (await request.body()).decode("utf-8", errors="replace")
    if not is_valid_input(body, MAX_REQUEST_BODY_LENGTH):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid input: Request too large or contains suspicious content.",
        )


@router.post("/generate", response_model=CoverLetterResponse, dependencies=[Depends(guard_request_body)])
async def generate_cover_letter(
    request: GenerateCoverLetterRequest,
    llm: LLMPort = Depends(get_llm_port),
):
    if not request.job_description or not request.user_profile:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Both jobDescription and userProfile are required in the request body.",
        )
    if not (is_valid_input(request.job_description, MAX_FIELD_LENGTH)
            and is_valid_input(request.user_profile, MAX_FIELD_LENGTH)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Job description or user profile contains invalid content or is too long.",
        )

    try:
        cover_letter = await cover_letter_service.generate(llm, request.job_description, request.user_profile)
    except Exception as e:
        logger.error("Error generating cover letter", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=generic_error_message("generating cover letter"),
        )
    return CoverLetterResponse(cover_letter=cover_letter)


@router.post("/from-job", response_model=CoverLetterFromJobResponse)
async def generate_from_job(
    request: CoverLetterFromJobRequest,
    user_id: int = Depends(get_current_user_id),
    llm: LLMPort = Depends(get_llm_port),
    jobs: JobRepository = Depends(get_job_repo),
    users: UserRepository = Depends(get_user_repo),
):
    """Generate a cover letter for a stored job using the caller's own profile."""
    if request.custom_user_profile and not is_valid_input(request.custom_user_profile, MAX_FIELD_LENGTH):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User profile contains invalid content or is too long.",
        )

    try:
        cover_letter, job, user_profile = await cover_letter_service.generate_from_job(
            llm,
            jobs,
            users,
            job_id=request.job_id,
            user_id=user_id,
            custom_profile=request.custom_user_profile,
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error("Error generating cover letter from job", extra={
            "jobId": request.job_id, "userId": user_id, "error": str(e),
        }, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=generic_error_message("generating cover letter"),
        )

    return CoverLetterFromJobResponse(
        cover_letter=cover_letter,
        job_title=job.title,
        job_location=job.location,
        user_profile=user_profile,
    )


@router.post("", response_model=SaveCoverLetterResponse)
async def save_cover_letter(
    request: SaveCoverLetterRequest,
    storage: BlobStoragePort = Depends(get_blob_storage),
):
    """Store a draft; the email worker sends it later."""
    if not request.email or not request.cover_letter:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and coverLetter are required in the request body.",
        )

    draft = CoverLetterDraft(
        email=request.email,
        name=request.name or "User",
        cover_letter=request.cover_letter,
        job_title=request.job_title or "Not specified",
        company_name=request.company_name or "Not specified",
    )
    try:
        blob_name = cover_letter_service.save_draft(storage, draft)
    except Exception as e:
        logger.error("Error saving cover letter", extra={"email": request.email, "error": str(e)}, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=generic_error_message("saving cover letter"),
        )
    return SaveCoverLetterResponse(blob_name=blob_name, message="Cover letter saved successfully")
