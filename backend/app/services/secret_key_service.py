"""
Secret key service: generation and owner-scoped CRUD.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from app.core.exceptions import ForbiddenError, NotFoundError
from app.core.security import generate_secret_key
from app.database.databases import skg_db
from app.database.ids import parse_object_id
from app.models.secret_key import SecretKey
from app.schemas.secret_key import (
    GeneratedSecretKey,
    SecretKeyCreate,
    SecretKeyResponse,
    SecretKeyUpdate,
)
from app.schemas.user import MessageResponse

logger = logging.getLogger(__name__)


class SecretKeyService:
    """Service for secret key operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the application database."""
        self.db = db
        self.secret_keys = db[skg_db.Collections.SECRET_KEYS]

    @staticmethod
    def generate() -> GeneratedSecretKey:
        """Produce a random secret without persisting it."""
        return GeneratedSecretKey(secret_key=generate_secret_key())

    async def create(self, owner_id: str, request: SecretKeyCreate) -> SecretKeyResponse:
        """Create and store a new secret key for the owner."""
        secret_key = SecretKey(
            title=request.title,
            secret_key=generate_secret_key(),
            user_id=owner_id,
        )
        doc = secret_key.to_document()

        result = await self.secret_keys.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._to_response(doc)

    async def list_for_owner(self, owner_id: str) -> list[SecretKeyResponse]:
        """List the owner's secret keys in store order."""
        cursor = self.secret_keys.find({"userId": owner_id})
        docs = await cursor.to_list(length=None)
        return [self._to_response(doc) for doc in docs]

    async def get(self, secret_key_id: str, owner_id: str) -> SecretKeyResponse:
        """Get a secret key the requester owns."""
        doc = await self._get_owned(secret_key_id, owner_id)
        return self._to_response(doc)

    async def update(
        self, secret_key_id: str, owner_id: str, request: SecretKeyUpdate
    ) -> SecretKeyResponse:
        """Rename a secret key. The secret value itself never changes."""
        doc = await self._get_owned(secret_key_id, owner_id)

        updated = await self.secret_keys.find_one_and_update(
            {"_id": doc["_id"]},
            {"$set": {"title": request.title}},
            return_document=ReturnDocument.AFTER,
        )
        if updated is None:
            raise NotFoundError("Secret key not found")
        return self._to_response(updated)

    async def delete(self, secret_key_id: str, owner_id: str) -> MessageResponse:
        """Delete a secret key the requester owns."""
        doc = await self._get_owned(secret_key_id, owner_id)
        await self.secret_keys.delete_one({"_id": doc["_id"]})
        logger.info("Deleted secret key %s of user %s", secret_key_id, owner_id)
        return MessageResponse(message="Secret key deleted successfully")

    async def exists(self, secret_key_id: str) -> bool:
        """Whether a secret key with this id exists, regardless of owner."""
        object_id = parse_object_id(secret_key_id)
        if object_id is None:
            return False
        return await self.secret_keys.find_one({"_id": object_id}) is not None

    # ==================== Helpers ====================

    async def _get_owned(self, secret_key_id: str, owner_id: str) -> dict:
        """
        Fetch a secret key and check ownership.

        Raises:
            NotFoundError: No such secret key
            ForbiddenError: The key belongs to another user
        """
        object_id = parse_object_id(secret_key_id)
        doc = None
        if object_id is not None:
            doc = await self.secret_keys.find_one({"_id": object_id})

        if doc is None:
            raise NotFoundError("Secret key not found")

        if doc.get("userId") != owner_id:
            logger.warning(
                "User %s denied access to secret key %s", owner_id, secret_key_id
            )
            raise ForbiddenError("Unauthorized access")

        return doc

    def _to_response(self, doc: dict) -> SecretKeyResponse:
        return SecretKeyResponse(
            id=str(doc["_id"]),
            title=doc.get("title", ""),
            secret_key=doc["secretKey"],
            user_id=doc["userId"],
            created_at=doc.get("createdAt"),
        )
