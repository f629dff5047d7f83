"""Email sender port: outbound delivery of composed messages."""

from typing import Protocol

from domain.model.cover_letter import EmailMessage


class EmailSender(Protocol):
    """Sends a composed message. Implementations return False on failure instead of raising."""

    async def send(self, message: EmailMessage) -> bool: ...
