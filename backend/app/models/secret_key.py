"""
Secret key model for the secret_keys collection.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.user import utc_timestamp


class SecretKey(BaseModel):
    """
    Secret key document model for MongoDB secret_keys collection.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    title: str = Field(..., description="User supplied label")
    secret_key: str = Field(..., alias="secretKey", description="Hex-encoded random secret")
    user_id: str = Field(..., alias="userId", description="Owner user ID")
    created_at: str = Field(
        default_factory=utc_timestamp,
        alias="createdAt",
        description="Creation timestamp",
    )

    def to_document(self) -> dict:
        """Document to insert, without the store-assigned id."""
        return self.model_dump(by_alias=True, exclude={"id"})
