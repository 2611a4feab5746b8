# tests/services/conftest.py
from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from tagstore.services.api.app import create_app
from tagstore.services.api.deps import get_content_service


@pytest.fixture()
def api_client(service):
    """
    A TestClient whose `get_content_service` dependency is overridden to use
    the test engine. Tables are emptied by the `session_factory` fixture.
    """
    app = create_app()
    app.dependency_overrides[get_content_service] = lambda: service

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
