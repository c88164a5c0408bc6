"""
User request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.user import FavoriteSecretKey


class UserResponse(BaseModel):
    """User information response (excludes the password hash)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="First name")
    surname: str = Field(default="", description="Last name")
    username: str = Field(..., description="Username")
    is_admin: bool = Field(default=False, alias="isAdmin", description="Admin flag")
    created_at: Optional[str] = Field(None, alias="createdAt", description="Creation timestamp")
    fav_sk: list[FavoriteSecretKey] = Field(
        default_factory=list, alias="favSK", description="Favorite secret keys"
    )


class UserSelfUpdate(BaseModel):
    """Fields a user may change on their own account."""
    name: Optional[str] = Field(None, description="New first name")
    surname: Optional[str] = Field(None, description="New last name")
    username: Optional[str] = Field(None, min_length=1, description="New username")
    password: Optional[str] = Field(None, min_length=1, description="New password")


class UserAdminUpdate(UserSelfUpdate):
    """Admin update request; may also change the admin flag."""
    model_config = ConfigDict(populate_by_name=True)

    is_admin: Optional[bool] = Field(None, alias="isAdmin", description="Admin flag")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str
