"""
Authentication service for registration and login.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.config import get_settings
from app.core.exceptions import ConflictError, InvalidCredentialsError
from app.core.security import create_access_token, hash_password, verify_password
from app.database.databases import skg_db
from app.models.user import User
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the application database."""
        self.db = db
        self.users_collection = db[skg_db.Collections.USERS]
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> TokenResponse:
        """
        Register a new user and issue a token for it.

        Args:
            request: Registration request

        Returns:
            TokenResponse with the new user's JWT

        Raises:
            ConflictError: If the username is already taken
        """
        # Check if username already exists
        existing = await self.users_collection.find_one({"username": request.username})
        if existing:
            raise ConflictError("User already exists")

        is_admin = request.is_admin and self.settings.allow_admin_registration

        user = User(
            name=request.name,
            surname=request.surname or "",
            username=request.username,
            password=hash_password(request.password),
            is_admin=is_admin,
        )

        try:
            result = await self.users_collection.insert_one(user.to_document())
        except DuplicateKeyError:
            # Lost the race against a concurrent registration
            raise ConflictError("User already exists")

        user_id = str(result.inserted_id)
        logger.info("Registered user %s (admin=%s)", user_id, is_admin)

        return TokenResponse(
            message="User registered successfully",
            token=create_access_token(user_id=user_id, is_admin=is_admin),
        )

    async def login(self, request: LoginRequest) -> TokenResponse:
        """
        Authenticate user and return JWT token.

        Raises:
            InvalidCredentialsError: Unknown username or wrong password
        """
        user_doc = await self.users_collection.find_one({"username": request.username})

        if not user_doc or not verify_password(request.password, user_doc.get("password", "")):
            logger.warning("Failed login for username %r", request.username)
            raise InvalidCredentialsError("Invalid credentials")

        user_id = str(user_doc["_id"])
        access_token = create_access_token(
            user_id=user_id,
            is_admin=user_doc.get("isAdmin", False),
        )
        logger.info("User %s logged in", user_id)

        return TokenResponse(message="Login successful", token=access_token)
