"""
Pydantic models for database documents and data structures.
"""
from app.models.user import User, FavoriteSecretKey, utc_timestamp
from app.models.secret_key import SecretKey

__all__ = [
    "User",
    "FavoriteSecretKey",
    "SecretKey",
    "utc_timestamp",
]
