"""
Database module - MongoDB connection and database definitions.
"""
from app.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from app.database.databases import skg_db
from app.database.ids import parse_object_id

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "skg_db",
    "parse_object_id",
]
