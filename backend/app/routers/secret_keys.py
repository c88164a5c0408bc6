"""
Secret key router: generation and owner-scoped CRUD.
"""
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.connections import get_database
from app.dependencies.auth import CurrentUser
from app.schemas.secret_key import (
    GeneratedSecretKey,
    SecretKeyCreate,
    SecretKeyResponse,
    SecretKeyUpdate,
)
from app.schemas.user import MessageResponse
from app.services.secret_key_service import SecretKeyService

router = APIRouter(prefix="/skg", tags=["Secret Keys"])


async def get_secret_key_service(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> SecretKeyService:
    """Dependency to get SecretKeyService instance."""
    return SecretKeyService(db)


@router.post(
    "/generate",
    response_model=GeneratedSecretKey,
    summary="Generate a secret without saving it",
)
async def generate_secret_key():
    """
    Return 32 random bytes as 64 hex characters. Nothing is stored.
    """
    return SecretKeyService.generate()


@router.post(
    "",
    response_model=SecretKeyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create secret key",
)
async def create_secret_key(
    body: SecretKeyCreate,
    current_user: CurrentUser,
    service: SecretKeyService = Depends(get_secret_key_service),
):
    """
    Create a new secret key owned by the caller.

    - **title**: Label for the key
    """
    return await service.create(current_user.id, body)


@router.get(
    "",
    response_model=list[SecretKeyResponse],
    summary="List own secret keys",
)
async def list_secret_keys(
    current_user: CurrentUser,
    service: SecretKeyService = Depends(get_secret_key_service),
):
    return await service.list_for_owner(current_user.id)


@router.get(
    "/{secret_key_id}",
    response_model=SecretKeyResponse,
    summary="Get secret key",
)
async def get_secret_key(
    secret_key_id: str,
    current_user: CurrentUser,
    service: SecretKeyService = Depends(get_secret_key_service),
):
    """
    Get one of the caller's secret keys.

    404 if it does not exist, 403 if another user owns it.
    """
    return await service.get(secret_key_id, current_user.id)


@router.put(
    "/{secret_key_id}",
    response_model=SecretKeyResponse,
    summary="Rename secret key",
)
async def update_secret_key(
    secret_key_id: str,
    body: SecretKeyUpdate,
    current_user: CurrentUser,
    service: SecretKeyService = Depends(get_secret_key_service),
):
    """
    Change the title of one of the caller's secret keys.
    """
    return await service.update(secret_key_id, current_user.id, body)


@router.delete(
    "/{secret_key_id}",
    response_model=MessageResponse,
    summary="Delete secret key",
)
async def delete_secret_key(
    secret_key_id: str,
    current_user: CurrentUser,
    service: SecretKeyService = Depends(get_secret_key_service),
):
    return await service.delete(secret_key_id, current_user.id)
