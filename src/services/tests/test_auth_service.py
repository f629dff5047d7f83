"""Unit tests for auth_service.register / login using FakeUserRepository."""

import unittest
from unittest.mock import MagicMock

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import DuplicateError
from services import auth_service
from services.passwords import hash_password
from services.token_service import TokenService
from utils.config import AuthSettings

STRONG_PASSWORD = "Abc123!@"


class AuthServiceTestBase(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()
        self.tokens = TokenService(AuthSettings(jwt_secret="auth-service-test-secret"))

    def _register(self, email="jo@example.com", password=STRONG_PASSWORD):
        return auth_service.register(self.repo, self.tokens, "Jo", "Doe", email, password)


class TestPasswordStrength(unittest.TestCase):

    def test_weak_passwords(self):
        for password in ("abc12345", "ABC123!@", "abc!@#$%", "Abc!@#$%", "Ab1!", "", "Abcdefgh1"):
            with self.subTest(password=password):
                self.assertFalse(auth_service.is_password_strong(password))

    def test_strong_password(self):
        self.assertTrue(auth_service.is_password_strong("Abc123!@"))
        self.assertTrue(auth_service.is_password_strong("Longer pass 9"))

    def test_normalize_email(self):
        self.assertEqual(auth_service.normalize_email("  Jo@Example.COM "), "jo@example.com")
        self.assertEqual(auth_service.normalize_email(None), "")


class TestRegister(AuthServiceTestBase):

    def test_register_success_returns_token_and_summary(self):
        result = self._register()

        self.assertTrue(result.success)
        self.assertEqual(result.message, "Registration successful")
        self.assertIsNotNone(result.token)
        self.assertEqual(result.user.first_name, "Jo")
        self.assertEqual(result.user.email, "jo@example.com")
        self.assertEqual(self.tokens.extract_user_id(result.token), result.user.id)

    def test_register_stores_normalized_email_and_hash(self):
        self._register(email="  Jo@Example.com ")

        stored = self.repo.get_by_email("jo@example.com")
        self.assertIsNotNone(stored)
        self.assertNotEqual(stored.password_hash, STRONG_PASSWORD)
        self.assertTrue(stored.password_hash.startswith("$2"))

    def test_long_password_registers_and_logs_in(self):
        long_password = STRONG_PASSWORD + "x" * 70

        registered = self._register(password=long_password)
        logged_in = auth_service.login(self.repo, self.tokens, "jo@example.com", long_password)

        self.assertTrue(registered.success, registered.message)
        self.assertTrue(logged_in.success)
        self.assertEqual(logged_in.user.id, registered.user.id)

    def test_duplicate_email_case_insensitive(self):
        self._register(email="jo@example.com")

        result = self._register(email="JO@EXAMPLE.COM")

        self.assertFalse(result.success)
        self.assertEqual(result.message, "Email already registered")
        self.assertIsNone(result.token)
        self.assertEqual(len(self.repo.store), 1)

    def test_duplicate_reported_before_weak_password(self):
        self._register()

        result = self._register(password="weak")

        self.assertEqual(result.message, "Email already registered")

    def test_weak_password_rejected(self):
        result = self._register(password="abc12345")

        self.assertFalse(result.success)
        self.assertEqual(result.message, auth_service.WEAK_PASSWORD)
        self.assertEqual(len(self.repo.store), 0)

    def test_unique_violation_at_insert_maps_to_duplicate(self):
        """A concurrent registration that wins the race surfaces as a duplicate."""
        repo = MagicMock()
        repo.get_by_email.return_value = None
        repo.create.side_effect = DuplicateError("taken")

        result = auth_service.register(repo, self.tokens, "Jo", "Doe", "jo@example.com", STRONG_PASSWORD)

        self.assertFalse(result.success)
        self.assertEqual(result.message, "Email already registered")

    def test_non_positive_id_is_creation_failure(self):
        repo = MagicMock()
        repo.get_by_email.return_value = None
        repo.create.return_value = 0

        result = auth_service.register(repo, self.tokens, "Jo", "Doe", "jo@example.com", STRONG_PASSWORD)

        self.assertFalse(result.success)
        self.assertEqual(result.message, "Failed to create account")

    def test_storage_error_is_generic_failure(self):
        repo = MagicMock()
        repo.get_by_email.side_effect = RuntimeError("connection refused on db-host:5432")

        with self.assertLogs("services.auth_service", level="ERROR"):
            result = auth_service.register(repo, self.tokens, "Jo", "Doe", "jo@example.com", STRONG_PASSWORD)

        self.assertFalse(result.success)
        self.assertEqual(result.message, "Registration failed")
        self.assertNotIn("db-host", result.message)


class TestLogin(AuthServiceTestBase):

    def test_login_success(self):
        registered = self._register()

        result = auth_service.login(self.repo, self.tokens, "jo@example.com", STRONG_PASSWORD)

        self.assertTrue(result.success)
        self.assertEqual(result.message, "Login successful")
        self.assertEqual(result.user.id, registered.user.id)
        self.assertEqual(self.tokens.extract_user_id(result.token), registered.user.id)

    def test_login_email_is_case_insensitive(self):
        self._register()

        result = auth_service.login(self.repo, self.tokens, " JO@example.com", STRONG_PASSWORD)

        self.assertTrue(result.success)

    def test_unknown_email_and_wrong_password_look_identical(self):
        self._register()

        unknown = auth_service.login(self.repo, self.tokens, "nobody@example.com", STRONG_PASSWORD)
        wrong = auth_service.login(self.repo, self.tokens, "jo@example.com", "Wrong123!")

        self.assertEqual(unknown, wrong)
        self.assertEqual(unknown.message, "Invalid credentials")
        self.assertFalse(unknown.success)

    def test_summary_never_exposes_hash(self):
        self._register()

        result = auth_service.login(self.repo, self.tokens, "jo@example.com", STRONG_PASSWORD)

        self.assertFalse(hasattr(result.user, "password_hash"))

    def test_storage_error_is_generic_failure(self):
        repo = MagicMock()
        repo.get_by_email.side_effect = RuntimeError("boom")

        with self.assertLogs("services.auth_service", level="ERROR"):
            result = auth_service.login(repo, self.tokens, "jo@example.com", STRONG_PASSWORD)

        self.assertEqual(result.message, "Login failed")

    def test_user_with_unusable_hash_cannot_login(self):
        self.repo.create("Jo", "Doe", "jo@example.com", "corrupted")

        result = auth_service.login(self.repo, self.tokens, "jo@example.com", STRONG_PASSWORD)

        self.assertEqual(result.message, "Invalid credentials")

    def test_login_against_precomputed_hash(self):
        self.repo.create("Ann", "Lee", "ann@example.com", hash_password("Secret1!"))

        result = auth_service.login(self.repo, self.tokens, "ann@example.com", "Secret1!")

        self.assertTrue(result.success)
        self.assertEqual(result.user.first_name, "Ann")


if __name__ == '__main__':
    unittest.main()
