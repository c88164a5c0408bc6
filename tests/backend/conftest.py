"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing FastAPI
routes against the in-memory database.
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))

TEST_API_KEY = "test-api-key"


# =============================================================================
# App / Client Fixtures
# =============================================================================

@pytest.fixture
def app(mock_db):
    """
    FastAPI app with the database dependency pointed at the mock database.

    The lifespan is not run, so no real MongoDB connection is attempted.
    """
    from app.database.connections import get_database
    from app.main import app as fastapi_app

    async def _get_mock_db():
        return mock_db

    fastapi_app.dependency_overrides[get_database] = _get_mock_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app):
    """
    Async test client that sends the API key on every request.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-API-Key": TEST_API_KEY},
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def anonymous_client(app):
    """Async test client without the API key header."""
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# =============================================================================
# Auth Helpers
# =============================================================================

@pytest.fixture
def auth_header():
    """Build an Authorization header in the canonical Bearer form."""
    def _header(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _header


@pytest.fixture
def register_user(async_client):
    """
    Register a user through the API and return (user_id, token).
    """
    from app.core.security import decode_token

    async def _register(username: str, password: str = "Password123!", **extra):
        body = {"name": username.capitalize(), "username": username, "password": password}
        body.update(extra)
        response = await async_client.post("/api/users/register", json=body)
        assert response.status_code == 201, response.text
        token = response.json()["token"]
        return decode_token(token).id, token

    return _register


@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, message_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "message" in data
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
    return _assert
