"""
User service: account management and favorites.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError, NotFoundError
from app.core.security import hash_password
from app.database.databases import skg_db
from app.database.ids import parse_object_id
from app.models.user import FavoriteSecretKey
from app.schemas.user import MessageResponse, UserResponse, UserSelfUpdate
from app.services.secret_key_service import SecretKeyService

logger = logging.getLogger(__name__)


class UserService:
    """Service for user account operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the application database."""
        self.db = db
        self.users = db[skg_db.Collections.USERS]
        self.secret_key_service = SecretKeyService(db)

    async def list_users(self) -> list[UserResponse]:
        """All users, newest first."""
        cursor = self.users.find({}).sort("createdAt", -1)
        docs = await cursor.to_list(length=None)
        return [self._to_response(doc) for doc in docs]

    async def get_user(self, user_id: str) -> UserResponse:
        """
        Get a user by ID.

        Raises:
            NotFoundError: If no such user exists
        """
        doc = await self._find(user_id)
        if doc is None:
            raise NotFoundError("User not found")
        return self._to_response(doc)

    async def update_user(self, user_id: str, request: UserSelfUpdate) -> MessageResponse:
        """
        Update only the supplied fields of a user.

        Accepts either update schema; the admin one may also carry isAdmin.
        A new password is hashed before storage.

        Raises:
            NotFoundError: If no such user exists
            ConflictError: If the new username is taken by another user
        """
        object_id = parse_object_id(user_id)
        if object_id is None:
            raise NotFoundError("User not found")

        update_data = {
            k: v
            for k, v in request.model_dump(by_alias=True, exclude_unset=True).items()
            if v is not None
        }

        if "password" in update_data:
            update_data["password"] = hash_password(update_data["password"])

        if "username" in update_data:
            taken = await self.users.find_one(
                {"username": update_data["username"], "_id": {"$ne": object_id}}
            )
            if taken:
                raise ConflictError("Username already taken")

        if not update_data:
            if await self.users.find_one({"_id": object_id}) is None:
                raise NotFoundError("User not found")
            return MessageResponse(message="User updated successfully")

        try:
            result = await self.users.update_one(
                {"_id": object_id},
                {"$set": update_data},
            )
        except DuplicateKeyError:
            raise ConflictError("Username already taken")

        if result.matched_count == 0:
            raise NotFoundError("User not found")

        logger.info("Updated user %s fields %s", user_id, sorted(update_data))
        return MessageResponse(message="User updated successfully")

    async def delete_user(self, user_id: str) -> MessageResponse:
        """Delete a user. Deleting an unknown id is not an error."""
        object_id = parse_object_id(user_id)
        if object_id is not None:
            result = await self.users.delete_one({"_id": object_id})
            if result.deleted_count:
                logger.info("Deleted user %s", user_id)
        return MessageResponse(message="User deleted successfully")

    async def add_favorite(self, user_id: str, secret_key_id: str) -> MessageResponse:
        """
        Append a secret key to the user's favorites if it is not there yet.

        Any existing secret key may be favorited, whoever owns it.

        Raises:
            NotFoundError: Unknown secret key, or the user no longer exists
            ConflictError: The key is already a favorite
        """
        if not await self.secret_key_service.exists(secret_key_id):
            raise NotFoundError("Secret key not found")

        object_id = parse_object_id(user_id)
        if object_id is None:
            raise NotFoundError("User not found")

        favorite = FavoriteSecretKey(sk_id=secret_key_id)

        # Conditional push: matches only while skId is absent from favSK
        result = await self.users.update_one(
            {"_id": object_id, "favSK.skId": {"$ne": secret_key_id}},
            {"$push": {"favSK": favorite.model_dump(by_alias=True)}},
        )

        if result.matched_count == 0:
            if await self.users.find_one({"_id": object_id}) is None:
                raise NotFoundError("User not found")
            raise ConflictError("Secret key already in favourites")

        return MessageResponse(message="Secret key added to favourites")

    # ==================== Helpers ====================

    async def _find(self, user_id: str) -> Optional[dict]:
        object_id = parse_object_id(user_id)
        if object_id is None:
            return None
        return await self.users.find_one({"_id": object_id})

    def _to_response(self, doc: dict) -> UserResponse:
        return UserResponse(
            id=str(doc["_id"]),
            name=doc.get("name", ""),
            surname=doc.get("surname") or "",
            username=doc["username"],
            is_admin=doc.get("isAdmin", False),
            created_at=doc.get("createdAt"),
            fav_sk=doc.get("favSK") or [],
        )
