"""Tests for profile_service get/update/list."""

import unittest

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import NotFoundError
from domain.model.user import ProfileUpdate
from services import profile_service


class TestProfileService(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()
        self.user_id = self.repo.create("Jo", "Doe", "jo@example.com", "hash")

    def test_get_profile(self):
        self.assertEqual(profile_service.get_profile(self.repo, self.user_id).email, "jo@example.com")

    def test_get_missing_profile(self):
        with self.assertRaises(NotFoundError):
            profile_service.get_profile(self.repo, 999)

    def test_update_keeps_names_when_omitted_and_replaces_other_fields(self):
        profile_service.update_profile(self.repo, self.user_id, ProfileUpdate(location="Austin", about_me="Hi"))
        user = profile_service.update_profile(self.repo, self.user_id, ProfileUpdate(job_title="Analyst"))

        self.assertEqual(user.first_name, "Jo")
        self.assertEqual(user.last_name, "Doe")
        self.assertEqual(user.job_title, "Analyst")
        self.assertIsNone(user.location)
        self.assertEqual(user.email, "jo@example.com")
        self.assertEqual(user.password_hash, "hash")

    def test_update_missing_user(self):
        with self.assertRaises(NotFoundError):
            profile_service.update_profile(self.repo, 999, ProfileUpdate())

    def test_list_applicants(self):
        self.repo.create("Ann", "Lee", "ann@example.com", "hash")
        self.assertEqual([u.first_name for u in profile_service.list_applicants(self.repo)], ["Jo", "Ann"])


if __name__ == '__main__':
    unittest.main()
