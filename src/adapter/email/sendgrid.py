"""SendGrid implementation of EmailSender."""

import logging

import httpx

from adapter.email.http_sender import RetryingHttpSender
from domain.model.cover_letter import EmailMessage
from utils.config import EmailSettings

logger = logging.getLogger(__name__)

SENDGRID_API_URL = "https://api.sendgrid.com/v3/mail/send"


class SendGridEmailSender(RetryingHttpSender):
    provider = "sendgrid"
    # SendGrid acknowledges queued mail with 202 only
    success_statuses = (202,)

    def __init__(self, settings: EmailSettings, transport: httpx.AsyncBaseTransport | None = None, wait=None):
        super().__init__(transport=transport, wait=wait)
        self.api_key = settings.sendgrid_api_key
        self.from_email = settings.sendgrid_from_email
        self.from_name = settings.sendgrid_from_name

    def _can_send(self) -> bool:
        if not self.from_email:
            logger.error("SendGrid from email not configured")
            return False
        return True

    async def _post(self, client: httpx.AsyncClient, message: EmailMessage) -> httpx.Response:
        payload = {
            "personalizations": [
                {"to": [{"email": message.to_email, "name": message.to_name}]}
            ],
            "from": {"email": self.from_email, "name": self.from_name},
            "subject": message.subject,
            "content": [{"type": "text/plain", "value": message.body}],
        }
        return await client.post(
            SENDGRID_API_URL,
            json=payload,
            headers={"Authorization": f"Bearer {self.api_key}"},
        )
