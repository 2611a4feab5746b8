# tests/database/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy.orm import Session


@pytest.fixture()
def db(session_factory) -> Session:
    """
    Per-test Session inside a transaction that is rolled back afterwards.
    Repos never commit, so nothing from a repo test outlives the test.
    """
    session = session_factory()
    session.begin()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
