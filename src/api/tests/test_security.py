"""Unit tests for bearer token extraction and the get_current_user_id dependency."""

import unittest

from api.security import UnauthorizedError, extract_bearer_token, get_current_user_id
from services.token_service import TokenService
from utils.config import AuthSettings


class TestExtractBearerToken(unittest.TestCase):

    def test_extracts_token(self):
        self.assertEqual(extract_bearer_token("Bearer abc.def.ghi"), "abc.def.ghi")

    def test_rejects_missing_or_wrong_scheme(self):
        for header in (None, "", "abc.def.ghi", "Basic abc", "bearer abc", "Bearer", "Bearer   "):
            with self.subTest(header=header):
                self.assertIsNone(extract_bearer_token(header))


class TestGetCurrentUserId(unittest.TestCase):

    def setUp(self):
        self.tokens = TokenService(AuthSettings(jwt_secret="security-test-secret"))

    def test_valid_token_yields_user_id(self):
        token = self.tokens.issue(5, "jo@example.com", "Jo", "Doe")
        self.assertEqual(get_current_user_id(f"Bearer {token}", self.tokens), 5)

    def test_missing_header_raises(self):
        with self.assertRaises(UnauthorizedError):
            get_current_user_id(None, self.tokens)

    def test_invalid_token_raises(self):
        with self.assertRaises(UnauthorizedError):
            get_current_user_id("Bearer not-a-token", self.tokens)


if __name__ == '__main__':
    unittest.main()
