"""Shared retry loop for HTTP email providers."""

import logging

import httpx
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from domain.model.cover_letter import EmailMessage

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
API_TIMEOUT_SECONDS = 30.0


class DeliveryRejectedError(Exception):
    """Provider answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class RetryingHttpSender:
    """Base for senders that POST to a provider API.

    Subclasses implement ``_post``. Transport errors and non-success
    statuses are retried up to ``MAX_ATTEMPTS`` times with exponential
    backoff (1s, 2s). ``send`` never raises.
    """

    provider = "http"
    success_statuses: tuple[int, ...] = (200, 201, 202)

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None, wait=None):
        self._transport = transport
        self._wait = wait or wait_exponential(multiplier=1, min=1, max=4)

    async def _post(self, client: httpx.AsyncClient, message: EmailMessage) -> httpx.Response:
        raise NotImplementedError

    def _can_send(self) -> bool:
        return True

    async def send(self, message: EmailMessage) -> bool:
        if not self._can_send():
            return False

        try:
            async with httpx.AsyncClient(
                timeout=API_TIMEOUT_SECONDS, transport=self._transport
            ) as client:
                async for attempt in AsyncRetrying(
                    retry=retry_if_exception_type((httpx.RequestError, DeliveryRejectedError)),
                    stop=stop_after_attempt(MAX_ATTEMPTS),
                    wait=self._wait,
                ):
                    with attempt:
                        response = await self._post(client, message)
                        if response.status_code not in self.success_statuses:
                            logger.warning("Email provider rejected message", extra={
                                "provider": self.provider,
                                "status_code": response.status_code,
                                "attempt": attempt.retry_state.attempt_number,
                            })
                            raise DeliveryRejectedError(response.status_code, response.text)
        except RetryError as e:
            last = e.last_attempt.exception()
            logger.error("Email delivery failed after retries", extra={
                "provider": self.provider,
                "attempts": MAX_ATTEMPTS,
                "error": str(last),
            })
            return False
        except Exception as e:
            logger.error("Unexpected error sending email", extra={
                "provider": self.provider, "error": str(e),
            }, exc_info=True)
            return False

        logger.info("Email sent", extra={"provider": self.provider, "recipient": message.to_email})
        return True
