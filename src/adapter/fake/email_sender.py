"""In-memory implementation of EmailSender for testing."""

from domain.model.cover_letter import EmailMessage


class FakeEmailSender:
    """Records sent messages. ``succeed`` controls the reported outcome."""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> bool:
        self.sent.append(message)
        return self.succeed
