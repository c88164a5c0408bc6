"""
Database definitions and collection constants.
"""
from app.database.databases import skg_db

__all__ = ["skg_db"]
