"""
Global test fixtures for the Secret Key API.

This module provides shared fixtures for all tests including:
- Test settings injected through the environment
- Mock MongoDB (mongomock-motor)
- User and secret key document factories
"""

import os
import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Settings are read once and cached, so they must be in place before any
# app module is imported.
os.environ["API_SECRET_KEY"] = "test-api-key"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.pop("JWT_ACCESS_TOKEN_EXPIRE_MINUTES", None)

TEST_API_KEY = "test-api-key"
TEST_JWT_SECRET = "test-jwt-secret"


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_db(mock_async_mongo_client):
    """Provide mock skg_db database with the real indexes."""
    from app.database.registry import create_indexes

    db = mock_async_mongo_client["skg_db"]
    await create_indexes(db)
    yield db


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "name": "Alice",
        "surname": "Smith",
        "username": "alice",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def test_admin_data() -> dict:
    """Admin user data for registration."""
    return {
        "name": "Root",
        "username": "admin",
        "password": "AdminPassword123!",
        "isAdmin": True,
    }


@pytest.fixture
def make_user_doc():
    """Factory for user documents as stored in MongoDB."""
    from app.core.security import hash_password

    def _make(username: str = "bob", password: str = "Password123!", **overrides) -> dict:
        doc = {
            "name": username.capitalize(),
            "surname": "",
            "username": username,
            "password": hash_password(password),
            "isAdmin": False,
            "createdAt": "2024-10-15T12:00:00+00:00",
            "favSK": [],
        }
        doc.update(overrides)
        return doc

    return _make


@pytest.fixture
def make_secret_key_doc():
    """Factory for secret key documents as stored in MongoDB."""
    def _make(user_id: str, title: str = "My key", **overrides) -> dict:
        doc = {
            "title": title,
            "secretKey": "ab" * 32,
            "userId": user_id,
            "createdAt": "2024-10-15T12:00:00+00:00",
        }
        doc.update(overrides)
        return doc

    return _make
