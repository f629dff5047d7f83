"""Mailgun implementation of EmailSender."""

import logging

import httpx

from adapter.email.http_sender import RetryingHttpSender
from domain.model.cover_letter import EmailMessage
from utils.config import EmailSettings

logger = logging.getLogger(__name__)


class MailgunEmailSender(RetryingHttpSender):
    provider = "mailgun"
    success_statuses = (200,)

    def __init__(self, settings: EmailSettings, transport: httpx.AsyncBaseTransport | None = None, wait=None):
        super().__init__(transport=transport, wait=wait)
        self.api_key = settings.mailgun_api_key
        self.domain = settings.mailgun_domain
        self.from_email = settings.mailgun_from_email or (f"noreply@{self.domain}" if self.domain else None)
        self.from_name = settings.mailgun_from_name
        self.base_url = settings.mailgun_base_url.rstrip("/")

    def _can_send(self) -> bool:
        if not self.domain:
            logger.error("Mailgun domain not configured")
            return False
        return True

    async def _post(self, client: httpx.AsyncClient, message: EmailMessage) -> httpx.Response:
        return await client.post(
            f"{self.base_url}/v3/{self.domain}/messages",
            auth=("api", self.api_key or ""),
            data={
                "from": f"{self.from_name} <{self.from_email}>",
                "to": f"{message.to_name} <{message.to_email}>",
                "subject": message.subject,
                "text": message.body,
            },
        )
