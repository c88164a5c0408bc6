"""
User model for the users collection.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string (sorts chronologically)."""
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


class FavoriteSecretKey(BaseModel):
    """Entry of a user's favorites list."""
    model_config = ConfigDict(populate_by_name=True)

    sk_id: str = Field(..., alias="skId", description="Secret key ID")
    added_at: str = Field(
        default_factory=utc_timestamp,
        alias="addedAt",
        description="When the key was added to favorites",
    )


class User(BaseModel):
    """
    User document model for MongoDB users collection.

    Stored field names are camelCase (``isAdmin``, ``createdAt``, ``favSK``).
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="First name")
    surname: str = Field(default="", description="Last name")
    username: str = Field(..., description="Unique username")
    password: str = Field(..., description="Bcrypt hashed password")
    is_admin: bool = Field(default=False, alias="isAdmin", description="Admin flag")
    created_at: str = Field(
        default_factory=utc_timestamp,
        alias="createdAt",
        description="Account creation timestamp",
    )
    fav_sk: list[FavoriteSecretKey] = Field(
        default_factory=list,
        alias="favSK",
        description="Favorite secret keys, no duplicate skId",
    )

    def to_document(self) -> dict:
        """Document to insert, without the store-assigned id."""
        return self.model_dump(by_alias=True, exclude={"id"})
