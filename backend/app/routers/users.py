"""
Users router: registration, login, self-service, admin management and
favorites.

Self routes take the user id from the verified token only. They are
declared before the ``/{user_id}`` routes so ``myself`` never matches as an id.
"""
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.connections import get_database
from app.dependencies.auth import AdminUser, CurrentUser
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from app.schemas.user import (
    MessageResponse,
    UserAdminUpdate,
    UserResponse,
    UserSelfUpdate,
)
from app.services.auth_service import AuthService
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


async def get_auth_service(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db)


async def get_user_service(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(db)


# ==================== Self-service ====================


@router.get(
    "/myself",
    response_model=UserResponse,
    summary="Get current user",
)
async def get_myself(
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.get_user(current_user.id)


@router.put(
    "/myself",
    response_model=MessageResponse,
    summary="Update current user",
)
async def update_myself(
    body: UserSelfUpdate,
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Update the caller's own account. The admin flag cannot be changed here.
    """
    return await user_service.update_user(current_user.id, body)


@router.delete(
    "/myself",
    response_model=MessageResponse,
    summary="Delete current user",
)
async def delete_myself(
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.delete_user(current_user.id)


# ==================== Authentication ====================


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account and return a token for it.

    - **name**: First name
    - **surname**: Optional last name
    - **username**: Must be unique
    - **password**: Stored as a bcrypt hash
    - **isAdmin**: Optional admin flag
    """
    return await auth_service.register_user(body)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with username and password to receive a JWT token.

    Send it back as `Authorization: Bearer <token>`.
    """
    return await auth_service.login(body)


# ==================== Favorites ====================


@router.post(
    "/addsktofav/{sk_id}",
    response_model=MessageResponse,
    summary="Add secret key to favorites",
)
async def add_secret_key_to_favorites(
    sk_id: str,
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Add any existing secret key to the caller's favorites.

    404 if the key does not exist, 400 if it is already a favorite.
    """
    return await user_service.add_favorite(current_user.id, sk_id)


# ==================== Admin ====================


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
)
async def list_users(
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    """List all users, newest first. Admin only."""
    return await user_service.list_users()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
)
async def get_user(
    user_id: str,
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.get_user(user_id)


@router.put(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Update user",
)
async def update_user(
    user_id: str,
    body: UserAdminUpdate,
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    """Update any user, including the admin flag. Admin only."""
    return await user_service.update_user(user_id, body)


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Delete user",
)
async def delete_user(
    user_id: str,
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.delete_user(user_id)
