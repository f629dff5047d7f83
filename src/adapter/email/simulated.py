"""Email sender that only logs, for local development without provider credentials."""

import logging

from domain.model.cover_letter import EmailMessage
from utils.logging import sanitize_log_message

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 200


class SimulatedEmailSender:
    async def send(self, message: EmailMessage) -> bool:
        logger.info("Simulated email delivery", extra={
            "recipient": message.to_email,
            "recipientName": message.to_name,
            "subject": message.subject,
            "preview": sanitize_log_message(message.body[:PREVIEW_LENGTH]),
        })
        return True
