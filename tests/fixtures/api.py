"""Shared fixtures for API testing.

These fixtures provide a TestClient and a fresh DriveSession for each test,
ensuring test isolation.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_session
from main import app
from models.seed import demo_seed
from models.session import DriveSession
from models.settings import DriveSettings
from tests.fixtures.entries import FixedClock


@pytest.fixture
def fresh_session():
    """Provide a DriveSession on the demo seed with a fixed clock.

    Returns:
        A newly initialized DriveSession.
    """
    settings = DriveSettings(_env_file=None, seed="demo", search_debounce_ms=300)
    return DriveSession(settings=settings, seed=demo_seed(), clock=FixedClock())


@pytest.fixture
def client_with_session(fresh_session):
    """Provide a TestClient with a fresh DriveSession injected.

    Uses FastAPI's dependency override system to inject the test session
    instead of the global one.

    Yields:
        A tuple of (TestClient, DriveSession) for testing.

    Example:
        def test_something(client_with_session):
            client, session = client_with_session
            response = client.get("/drive/state")
            assert response.status_code == 200
    """
    app.dependency_overrides[get_session] = lambda: fresh_session

    client = TestClient(app)

    yield client, fresh_session

    fresh_session.close()
    app.dependency_overrides.clear()
