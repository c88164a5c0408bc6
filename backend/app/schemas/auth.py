"""
Authentication request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Login request body."""
    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="User password")


class RegisterRequest(BaseModel):
    """Registration request body."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="First name")
    surname: Optional[str] = Field(None, description="Last name")
    username: str = Field(..., min_length=1, description="Unique username")
    password: str = Field(..., min_length=1, description="User password")
    is_admin: bool = Field(
        default=False,
        alias="isAdmin",
        description="Grant admin privileges to the new account",
    )


class TokenResponse(BaseModel):
    """Register/login response with JWT token."""
    message: str = Field(..., description="Outcome message")
    token: str = Field(..., description="Signed JWT access token")


class TokenPayload(BaseModel):
    """Verified JWT token payload."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Subject (user ID)")
    is_admin: bool = Field(default=False, alias="isAdmin", description="Admin flag")
