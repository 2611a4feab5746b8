# tests/conftest.py
from __future__ import annotations

import os

import pytest
from sqlalchemy import delete
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from tagstore.common.settings import Settings
from tagstore.database.core.main import create_db_engine, make_session_factory
from tagstore.database.models import Base  # <-- imports the models/metadata
from tagstore.services.content.service import ContentService


def _use_postgres() -> bool:
    return os.getenv("TAGSTORE_TEST_DB", "sqlite").lower() == "postgres"


@pytest.fixture(scope="session")
def database_url(tmp_path_factory) -> str:
    if not _use_postgres():
        yield f"sqlite:///{tmp_path_factory.mktemp('db') / 'tagstore.db'}"
        return

    from testcontainers.postgres import PostgresContainer

    with PostgresContainer("postgres:15-alpine") as pg:
        # Force psycopg (v3) driver in the URL returned by testcontainers
        url = pg.get_connection_url().replace("psycopg2", "psycopg")
        yield url


@pytest.fixture(scope="session")
def test_settings(database_url) -> Settings:
    return Settings(DATABASE_URL=database_url, DB_POOL_SIZE=5)


@pytest.fixture(scope="session")
def db_engine(test_settings) -> Engine:
    engine = create_db_engine(test_settings)

    # No migrations here; just create tables from models
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(db_engine) -> sessionmaker[Session]:
    """
    Session factory over the shared engine. Every table is emptied after the
    test, since service calls commit for real.
    """
    factory = make_session_factory(db_engine)
    try:
        yield factory
    finally:
        with db_engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(delete(table))


@pytest.fixture()
def service(session_factory, test_settings) -> ContentService:
    return ContentService(session_factory, test_settings)
