"""Database configuration and session management."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from notice.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict[str, Any]:
    """Return ``create_engine`` keyword arguments suited to ``database_url``."""

    if not database_url.startswith("sqlite"):
        return {"pool_pre_ping": True}

    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if database_url in {"sqlite://", "sqlite:///:memory:"}:
        # In-memory databases live on a single connection
        options["poolclass"] = StaticPool
    return options


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``."""

    logger.debug("Creating database engine for %s", database_url.split("://", 1)[0])
    return create_engine(database_url, **_engine_options(database_url))


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database(bind: Engine | None = None) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from notice.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=bind or engine, checkfirst=True)

