"""
Tests for database connections and initialization.

These tests cover:
- MongoDB connection initialization
- Index creation
- Object id parsing
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch


class TestMongoDBConnection:
    """Tests for MongoDB connection handling."""

    @pytest.mark.asyncio
    async def test_get_mongo_client_creates_connection_once(self):
        """get_mongo_client should create connection on first call only."""
        import app.database.connections as conn_module

        with patch("app.database.connections.AsyncIOMotorClient") as mock_client, \
             patch("app.database.connections.get_settings") as mock_settings:

            mock_settings.return_value.mongo_uri = "mongodb://test:27017"
            mock_instance = MagicMock()
            mock_client.return_value = mock_instance
            conn_module._mongo_client = None

            try:
                first = await conn_module.get_mongo_client()
                second = await conn_module.get_mongo_client()
            finally:
                conn_module._mongo_client = None

            mock_client.assert_called_once_with("mongodb://test:27017")
            assert first is mock_instance
            assert second is mock_instance

    @pytest.mark.asyncio
    async def test_get_database_uses_configured_name(self):
        """get_database should index the client with the configured db name."""
        import app.database.connections as conn_module

        mock_client = MagicMock()
        with patch(
            "app.database.connections.get_mongo_client",
            AsyncMock(return_value=mock_client),
        ):
            await conn_module.get_database()

        mock_client.__getitem__.assert_called_once_with("skg_db")

    @pytest.mark.asyncio
    async def test_get_database_follows_settings_override(self):
        """The database name comes from settings alone."""
        import app.database.connections as conn_module
        from app.config import get_settings

        settings = get_settings()
        original = settings.mongo_db_name
        settings.mongo_db_name = "skg_db_staging"
        mock_client = MagicMock()
        try:
            with patch(
                "app.database.connections.get_mongo_client",
                AsyncMock(return_value=mock_client),
            ):
                await conn_module.get_database()
        finally:
            settings.mongo_db_name = original

        mock_client.__getitem__.assert_called_once_with("skg_db_staging")

    @pytest.mark.asyncio
    async def test_close_connections_cleans_up(self):
        """close_connections should close and forget the client."""
        import app.database.connections as conn_module

        mock_mongo = MagicMock()
        conn_module._mongo_client = mock_mongo

        await conn_module.close_connections()

        mock_mongo.close.assert_called_once()
        assert conn_module._mongo_client is None


class TestIndexes:
    """Tests for index creation."""

    @pytest.mark.asyncio
    async def test_create_indexes_adds_unique_username(self, mock_db):
        """users.username must carry a unique index."""
        info = await mock_db.users.index_information()

        username_indexes = [
            idx for idx in info.values() if idx["key"] == [("username", 1)]
        ]
        assert username_indexes
        assert username_indexes[0].get("unique") is True

    @pytest.mark.asyncio
    async def test_create_indexes_adds_secret_key_owner_index(self, mock_db):
        info = await mock_db.secret_keys.index_information()

        assert any(idx["key"] == [("userId", 1)] for idx in info.values())

    @pytest.mark.asyncio
    async def test_create_indexes_survives_index_errors(self):
        """A failing index must not abort startup."""
        from pymongo.errors import OperationFailure
        from app.database.registry import create_indexes

        collection = MagicMock()
        collection.create_index = AsyncMock(side_effect=OperationFailure("duplicates"))
        db = MagicMock()
        db.__getitem__.return_value = collection

        await create_indexes(db)

        assert collection.create_index.await_count >= 3


class TestParseObjectId:
    """Tests for app.database.ids.parse_object_id."""

    def test_valid_id_is_parsed(self):
        from bson import ObjectId
        from app.database.ids import parse_object_id

        oid = ObjectId()
        assert parse_object_id(str(oid)) == oid

    @pytest.mark.parametrize("value", ["not-an-id", "", "123", None])
    def test_invalid_id_returns_none(self, value):
        from app.database.ids import parse_object_id

        assert parse_object_id(value) is None
