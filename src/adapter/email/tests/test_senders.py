"""Tests for Mailgun / SendGrid senders using httpx.MockTransport, and the sender factory."""

import unittest

import httpx
from tenacity import wait_none

from adapter.email.factory import create_email_sender
from adapter.email.mailgun import MailgunEmailSender
from adapter.email.sendgrid import SendGridEmailSender
from adapter.email.simulated import SimulatedEmailSender
from domain.model.cover_letter import EmailMessage
from utils.config import EmailSettings

MESSAGE = EmailMessage(to_email="jo@example.com", to_name="Jo", subject="Your letter", body="Hello Jo")


class RecordingHandler:
    """MockTransport handler answering with a fixed sequence of status codes."""

    def __init__(self, *statuses):
        self.statuses = list(statuses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status = self.statuses.pop(0) if len(self.statuses) > 1 else self.statuses[0]
        return httpx.Response(status, text="ok" if status < 400 else "error")


class TestMailgunSender(unittest.IsolatedAsyncioTestCase):

    def _sender(self, handler, **overrides):
        settings = EmailSettings(mailgun_api_key="key-123", mailgun_domain="mg.example.com", **overrides)
        return MailgunEmailSender(settings, transport=httpx.MockTransport(handler), wait=wait_none())

    async def test_posts_form_with_basic_auth(self):
        handler = RecordingHandler(200)

        ok = await self._sender(handler).send(MESSAGE)

        self.assertTrue(ok)
        request = handler.requests[0]
        self.assertEqual(str(request.url), "https://api.mailgun.net/v3/mg.example.com/messages")
        self.assertTrue(request.headers["authorization"].startswith("Basic "))
        body = request.content.decode()
        self.assertIn("subject=Your+letter", body)
        self.assertIn("noreply%40mg.example.com", body)

    async def test_retries_then_succeeds(self):
        handler = RecordingHandler(500, 503, 200)

        ok = await self._sender(handler).send(MESSAGE)

        self.assertTrue(ok)
        self.assertEqual(len(handler.requests), 3)

    async def test_gives_up_after_three_attempts(self):
        handler = RecordingHandler(500)

        ok = await self._sender(handler).send(MESSAGE)

        self.assertFalse(ok)
        self.assertEqual(len(handler.requests), 3)

    async def test_transport_errors_are_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ConnectError("refused", request=request)

        ok = await self._sender(handler).send(MESSAGE)

        self.assertFalse(ok)
        self.assertEqual(len(calls), 3)

    async def test_missing_domain_returns_false_without_request(self):
        handler = RecordingHandler(200)
        sender = MailgunEmailSender(
            EmailSettings(mailgun_api_key="key-123"),
            transport=httpx.MockTransport(handler),
            wait=wait_none(),
        )

        self.assertFalse(await sender.send(MESSAGE))
        self.assertEqual(handler.requests, [])

    async def test_custom_base_url_and_from(self):
        handler = RecordingHandler(200)
        sender = self._sender(
            handler,
            mailgun_base_url="https://api.eu.mailgun.net",
            mailgun_from_email="letters@example.com",
        )

        await sender.send(MESSAGE)

        self.assertTrue(str(handler.requests[0].url).startswith("https://api.eu.mailgun.net/v3/"))
        self.assertIn("letters%40example.com", handler.requests[0].content.decode())


class TestSendGridSender(unittest.IsolatedAsyncioTestCase):

    def _sender(self, handler, from_email="letters@example.com"):
        settings = EmailSettings(provider="sendgrid", sendgrid_api_key="SG.key", sendgrid_from_email=from_email)
        return SendGridEmailSender(settings, transport=httpx.MockTransport(handler), wait=wait_none())

    async def test_accepted_only_on_202(self):
        accepted = RecordingHandler(202)
        self.assertTrue(await self._sender(accepted).send(MESSAGE))
        self.assertEqual(accepted.requests[0].headers["authorization"], "Bearer SG.key")

        ok_but_not_queued = RecordingHandler(200)
        self.assertFalse(await self._sender(ok_but_not_queued).send(MESSAGE))
        self.assertEqual(len(ok_but_not_queued.requests), 3)

    async def test_missing_from_address_returns_false(self):
        handler = RecordingHandler(202)
        self.assertFalse(await self._sender(handler, from_email=None).send(MESSAGE))
        self.assertEqual(handler.requests, [])


class TestSimulatedSender(unittest.IsolatedAsyncioTestCase):

    async def test_logs_and_succeeds(self):
        with self.assertLogs("adapter.email.simulated", level="INFO"):
            self.assertTrue(await SimulatedEmailSender().send(MESSAGE))


class TestCreateEmailSender(unittest.TestCase):

    def test_provider_selection(self):
        self.assertIsInstance(
            create_email_sender(EmailSettings(provider="mailgun", mailgun_api_key="k", mailgun_domain="d")),
            MailgunEmailSender,
        )
        self.assertIsInstance(
            create_email_sender(EmailSettings(provider="sendgrid", sendgrid_api_key="k")),
            SendGridEmailSender,
        )
        self.assertIsInstance(create_email_sender(EmailSettings(provider="simulate")), SimulatedEmailSender)

    def test_missing_or_marker_key_simulates(self):
        self.assertIsInstance(create_email_sender(EmailSettings(provider="mailgun")), SimulatedEmailSender)
        self.assertIsInstance(
            create_email_sender(EmailSettings(provider="sendgrid", sendgrid_api_key="SIMULATE_LOCALLY")),
            SimulatedEmailSender,
        )


if __name__ == '__main__':
    unittest.main()
