from functools import lru_cache

from fastapi import HTTPException
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from adapter.email.factory import create_email_sender
from adapter.external.jooble import JoobleJobSource
from adapter.external.litellm import LiteLLMAdapter
from adapter.sql.connection import create_db_engine, create_session_factory
from adapter.sql.job_repository import SqlJobRepository
from adapter.sql.user_repository import SqlUserRepository
from adapter.storage.r2 import R2BlobStorage
from port.blob_storage import BlobStoragePort
from port.email_sender import EmailSender
from port.job_repository import JobRepository
from port.job_source import JobSourcePort
from port.llm import LLMPort
from port.user_repository import UserRepository
from services.token_service import TokenService
from utils.config import EmailSettings, get_settings


@lru_cache
def get_db_engine() -> Engine:
    return create_db_engine(get_settings().database.url)


@lru_cache
def _get_session_factory() -> sessionmaker[Session]:
    return create_session_factory(get_db_engine())


def get_user_repo() -> UserRepository:
    return SqlUserRepository(_get_session_factory())


def get_job_repo() -> JobRepository:
    return SqlJobRepository(_get_session_factory())


def get_token_service() -> TokenService:
    return TokenService(get_settings().auth)


def get_llm_port() -> LLMPort:
    return LiteLLMAdapter(get_settings().llm)


def get_blob_storage() -> BlobStoragePort:
    """Raise 503 if R2 credentials are not configured."""
    settings = get_settings().storage
    if not settings.is_configured:
        raise HTTPException(status_code=503, detail="Blob storage unavailable")
    return R2BlobStorage(settings)


def get_email_settings() -> EmailSettings:
    return get_settings().email


def get_email_sender() -> EmailSender:
    return create_email_sender(get_settings().email)


def get_job_source() -> JobSourcePort:
    api_key = get_settings().jooble_api_key
    if not api_key:
        raise HTTPException(status_code=503, detail="Job search unavailable")
    return JoobleJobSource(api_key)
