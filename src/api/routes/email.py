"""Direct cover letter email route."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from api.dependencies import get_email_sender, get_email_settings
from api.models import SendEmailRequest, SendEmailResponse
from port.email_sender import EmailSender
from services.email_service import send_cover_letter
from utils.config import EmailSettings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/email", tags=["email"])


@router.post("/send", response_model=SendEmailResponse)
async def send_email(
    request: SendEmailRequest,
    sender: EmailSender = Depends(get_email_sender),
    settings: EmailSettings = Depends(get_email_settings),
):
    if not request.email or not request.name or not request.cover_letter:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email, Name, and CoverLetter are required fields",
        )

    logger.info("Sending cover letter email", extra={"recipient": request.email})
    success = await send_cover_letter(
        sender,
        settings,
        to_email=request.email,
        name=request.name,
        cover_letter=request.cover_letter,
        job_title=request.job_title,
        company_name=request.company_name,
    )

    body = SendEmailResponse(
        success=success,
        message="Email sent successfully" if success else "Failed to send email",
        recipient=request.email,
        timestamp=datetime.now(timezone.utc),
    )
    if not success:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(mode="json", by_alias=True),
        )
    return body
