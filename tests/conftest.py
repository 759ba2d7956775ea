"""Shared test configuration."""

import os

import pytest

# Settings are read when ``notice.infrastructure.database`` is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("CSRF_SECRET", None)
os.environ.pop("NOTIFICATIONS_FILE", None)
os.environ.pop("FILTER_ORDER", None)


@pytest.fixture()
def session_factory():
    """Session factory bound to a fresh in-memory database."""

    from sqlalchemy.orm import sessionmaker

    from notice.infrastructure.database import build_engine, initialize_database

    engine = build_engine("sqlite://")
    initialize_database(bind=engine)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    finally:
        engine.dispose()
