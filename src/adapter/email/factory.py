"""Select the EmailSender implementation for the configured provider."""

import logging

from adapter.email.mailgun import MailgunEmailSender
from adapter.email.sendgrid import SendGridEmailSender
from adapter.email.simulated import SimulatedEmailSender
from port.email_sender import EmailSender
from utils.config import EmailSettings

logger = logging.getLogger(__name__)

SIMULATE_MARKER = "SIMULATE_LOCALLY"


def _missing_key(api_key: str | None) -> bool:
    return not api_key or api_key == SIMULATE_MARKER


def create_email_sender(settings: EmailSettings) -> EmailSender:
    """Build a sender for ``settings.provider``.

    Providers without an API key (or with ``SIMULATE_LOCALLY``) fall back
    to the simulated sender so local runs never hit a real provider.
    """
    provider = settings.provider.lower()

    if provider == "sendgrid":
        if _missing_key(settings.sendgrid_api_key):
            logger.warning("SendGrid API key not set; simulating email delivery")
            return SimulatedEmailSender()
        return SendGridEmailSender(settings)

    if provider == "mailgun":
        if _missing_key(settings.mailgun_api_key):
            logger.warning("Mailgun API key not set; simulating email delivery")
            return SimulatedEmailSender()
        return MailgunEmailSender(settings)

    if provider != "simulate":
        logger.warning("Unknown email provider; simulating email delivery", extra={"provider": provider})
    return SimulatedEmailSender()
