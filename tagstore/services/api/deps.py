# tagstore/services/api/deps.py
from __future__ import annotations

from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from tagstore.common.settings import get_settings
from tagstore.database.core.main import create_db_engine, make_session_factory
from tagstore.services.content.service import ContentService


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Process-wide engine, built on first use. Disposed by the app lifespan."""
    return create_db_engine(get_settings())


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    return make_session_factory(get_engine())


def get_content_service() -> ContentService:
    """
    Provide the ContentService via DI. Tests override this dependency to
    point the API at their own engine.
    """
    return ContentService(get_session_factory(), get_settings())
