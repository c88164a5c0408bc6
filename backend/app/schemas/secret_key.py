"""
Secret key request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SecretKeyCreate(BaseModel):
    """Create secret key request."""
    title: str = Field(..., description="Label for the new key")


class SecretKeyUpdate(BaseModel):
    """Update secret key request. Only the title is mutable."""
    title: str = Field(..., description="New label")


class GeneratedSecretKey(BaseModel):
    """A freshly generated, unsaved secret."""
    model_config = ConfigDict(populate_by_name=True)

    secret_key: str = Field(..., alias="secretKey", description="64 hex characters")


class SecretKeyResponse(BaseModel):
    """Stored secret key."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Secret key ID")
    title: str = Field(..., description="Label")
    secret_key: str = Field(..., alias="secretKey", description="64 hex characters")
    user_id: str = Field(..., alias="userId", description="Owner user ID")
    created_at: Optional[str] = Field(None, alias="createdAt", description="Creation timestamp")
