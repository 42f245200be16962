import logging
import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

logger = logging.getLogger(__name__)


def get_database_url() -> str | None:
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        return None
    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql+psycopg2://", 1)
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+psycopg2://", 1)
    return database_url


def _create_engine():
    database_url = get_database_url()
    if not database_url:
        return None
    engine_kwargs = {"pool_pre_ping": True}

    if database_url.startswith("postgresql+psycopg2://"):
        engine_kwargs["connect_args"] = {"application_name": "playlist-api"}

    return create_engine(database_url, **engine_kwargs)


engine = _create_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine) if engine else None


def get_db():
    if SessionLocal is None:
        raise RuntimeError("DATABASE_URL not configured")
    db = SessionLocal()
    logger.debug("db session open session_id=%s", id(db))
    try:
        yield db
    finally:
        logger.debug("db session close session_id=%s", id(db))
        db.close()
