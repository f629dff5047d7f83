"""Cloudflare R2 (S3-compatible) implementation of BlobStoragePort."""

import json
import logging
import uuid

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from domain.model.cover_letter import CoverLetterDraft
from port.blob_storage import BlobStorageError
from utils.config import StorageSettings

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = {'404', 'NoSuchKey', 'NotFound'}


def create_r2_client(settings: StorageSettings):
    """Create an S3 client pointed at the account's R2 endpoint."""
    return boto3.client(
        's3',
        endpoint_url=f'https://{settings.account_id}.r2.cloudflarestorage.com',
        aws_access_key_id=settings.access_key_id,
        aws_secret_access_key=settings.secret_access_key,
        config=Config(signature_version='s3v4', retries={'max_attempts': 3, 'mode': 'standard'}),
    )


def _is_not_found(error: ClientError) -> bool:
    return str(error.response.get('Error', {}).get('Code')) in _NOT_FOUND_CODES


class R2BlobStorage:
    """Stores cover letter drafts as JSON objects under a fixed key prefix.

    Blob names exposed to callers are relative to the prefix
    (``"<uuid>.json"``); the prefix is applied only when talking to R2.
    """

    def __init__(self, settings: StorageSettings, client=None):
        if not settings.bucket_name:
            raise ValueError("R2_BUCKET_NAME is required for blob storage")
        self.bucket = settings.bucket_name
        self.prefix = settings.prefix
        self._client = client or create_r2_client(settings)

    def _key(self, blob_name: str) -> str:
        return f'{self.prefix}{blob_name}'

    def upload_draft(self, draft: CoverLetterDraft) -> str:
        blob_name = f'{uuid.uuid4()}.json'
        body = json.dumps(draft.to_dict(), indent=2)
        try:
            self._client.put_object(
                Bucket=self.bucket,
                Key=self._key(blob_name),
                Body=body.encode('utf-8'),
                ContentType='application/json',
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to upload draft", extra={"blobName": blob_name, "error": str(e)})
            raise BlobStorageError(f"Failed to upload {blob_name}") from e

        logger.info("Draft uploaded", extra={"blobName": blob_name, "email": draft.email})
        return blob_name

    def list_blobs(self) -> list[str]:
        names: list[str] = []
        try:
            paginator = self._client.get_paginator('list_objects_v2')
            for page in paginator.paginate(Bucket=self.bucket, Prefix=self.prefix):
                for obj in page.get('Contents', []):
                    name = obj['Key'][len(self.prefix):]
                    if name:
                        names.append(name)
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to list blobs", extra={"prefix": self.prefix, "error": str(e)})
            raise BlobStorageError("Failed to list blobs") from e
        return names

    def download(self, blob_name: str) -> str | None:
        try:
            response = self._client.get_object(Bucket=self.bucket, Key=self._key(blob_name))
            return response['Body'].read().decode('utf-8')
        except ClientError as e:
            if _is_not_found(e):
                return None
            logger.error("Failed to download blob", extra={"blobName": blob_name, "error": str(e)})
            raise BlobStorageError(f"Failed to download {blob_name}") from e
        except BotoCoreError as e:
            logger.error("Failed to download blob", extra={"blobName": blob_name, "error": str(e)})
            raise BlobStorageError(f"Failed to download {blob_name}") from e

    def exists(self, blob_name: str) -> bool:
        try:
            self._client.head_object(Bucket=self.bucket, Key=self._key(blob_name))
            return True
        except ClientError as e:
            if _is_not_found(e):
                return False
            raise BlobStorageError(f"Failed to check {blob_name}") from e
        except BotoCoreError as e:
            raise BlobStorageError(f"Failed to check {blob_name}") from e

    def delete(self, blob_name: str) -> bool:
        # S3 delete is idempotent, so check first to report whether anything was removed
        if not self.exists(blob_name):
            return False
        try:
            self._client.delete_object(Bucket=self.bucket, Key=self._key(blob_name))
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to delete blob", extra={"blobName": blob_name, "error": str(e)})
            raise BlobStorageError(f"Failed to delete {blob_name}") from e
        logger.info("Blob deleted", extra={"blobName": blob_name})
        return True
