"""Unit tests for API dependencies: wiring of optional external services.

Blob storage and live job search are optional. When their credentials are
missing the dependency answers 503 instead of failing inside a route.
"""

import unittest
from unittest.mock import patch, MagicMock

from fastapi import HTTPException

from adapter.external.jooble import JoobleJobSource
from adapter.storage.r2 import R2BlobStorage
from api.dependencies import get_blob_storage, get_job_source
from utils.config import StorageSettings


class TestGetBlobStorage(unittest.TestCase):

    @patch('api.dependencies.get_settings')
    def test_raises_503_when_storage_not_configured(self, mock_get_settings):
        mock_get_settings.return_value = MagicMock(storage=StorageSettings())

        with self.assertRaises(HTTPException) as context:
            get_blob_storage()

        self.assertEqual(context.exception.status_code, 503)
        self.assertEqual(context.exception.detail, "Blob storage unavailable")

    @patch('adapter.storage.r2.create_r2_client')
    @patch('api.dependencies.get_settings')
    def test_returns_r2_storage_when_configured(self, mock_get_settings, mock_create_client):
        settings = StorageSettings(
            bucket_name="drafts", account_id="acct", access_key_id="key", secret_access_key="secret",
        )
        mock_get_settings.return_value = MagicMock(storage=settings)

        storage = get_blob_storage()

        self.assertIsInstance(storage, R2BlobStorage)
        mock_create_client.assert_called_once_with(settings)


class TestGetJobSource(unittest.TestCase):

    @patch('api.dependencies.get_settings')
    def test_raises_503_without_api_key(self, mock_get_settings):
        mock_get_settings.return_value = MagicMock(jooble_api_key=None)

        with self.assertRaises(HTTPException) as context:
            get_job_source()

        self.assertEqual(context.exception.status_code, 503)

    @patch('api.dependencies.get_settings')
    def test_returns_jooble_source_with_api_key(self, mock_get_settings):
        mock_get_settings.return_value = MagicMock(jooble_api_key="jk")

        self.assertIsInstance(get_job_source(), JoobleJobSource)


if __name__ == '__main__':
    unittest.main()
