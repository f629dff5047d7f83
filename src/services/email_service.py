"""Email service: turns a cover letter into a message and hands it to a sender."""

import logging

from domain.model.cover_letter import EmailMessage
from port.email_sender import EmailSender
from services.cover_letter_cleaner import clean_cover_letter
from utils.config import EmailSettings

logger = logging.getLogger(__name__)

UNKNOWN_POSITION = "Unknown Position"


class _TemplateValues(dict):
    """Leave unknown placeholders in place instead of raising KeyError."""

    def __missing__(self, key):
        return "{" + key + "}"


def compose_email(
    settings: EmailSettings,
    to_email: str,
    name: str,
    cover_letter: str,
    job_title: str | None = None,
    company_name: str | None = None,
) -> EmailMessage:
    values = _TemplateValues(
        name=name,
        job_title=job_title or UNKNOWN_POSITION,
        company_name=company_name or "",
        cover_letter=clean_cover_letter(cover_letter),
    )
    return EmailMessage(
        to_email=to_email,
        to_name=name,
        subject=settings.subject.format_map(values),
        body=settings.message_template.format_map(values),
    )


async def send_cover_letter(
    sender: EmailSender,
    settings: EmailSettings,
    to_email: str,
    name: str,
    cover_letter: str,
    job_title: str | None = None,
    company_name: str | None = None,
) -> bool:
    """Compose and send. Returns False on any failure; never raises."""
    try:
        message = compose_email(settings, to_email, name, cover_letter, job_title, company_name)
        sent = await sender.send(message)
    except Exception as e:
        logger.error("Failed to send cover letter", extra={"recipient": to_email, "error": str(e)}, exc_info=True)
        return False

    if sent:
        logger.info("Cover letter emailed", extra={"recipient": to_email})
    else:
        logger.warning("Cover letter email not delivered", extra={"recipient": to_email})
    return sent
