"""SQLAlchemy engine and session factory."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from adapter.sql.models import Base

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine. SQLite connections may be shared across threadpool workers."""
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, connect_args=connect_args, pool_pre_ping=True, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_schema(engine: Engine) -> None:
    """Create missing tables and indexes. Existing tables are left untouched."""
    Base.metadata.create_all(engine)
    logger.info("Database schema ready", extra={"tables": sorted(Base.metadata.tables)})
