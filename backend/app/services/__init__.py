"""
Service layer for business logic.
"""
from app.services.auth_service import AuthService
from app.services.secret_key_service import SecretKeyService
from app.services.user_service import UserService

__all__ = [
    "AuthService",
    "SecretKeyService",
    "UserService",
]
