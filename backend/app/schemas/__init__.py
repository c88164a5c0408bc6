"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    TokenPayload,
)
from app.schemas.user import (
    UserResponse,
    UserSelfUpdate,
    UserAdminUpdate,
    MessageResponse,
)
from app.schemas.secret_key import (
    SecretKeyCreate,
    SecretKeyUpdate,
    SecretKeyResponse,
    GeneratedSecretKey,
)

__all__ = [
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "TokenPayload",
    # User
    "UserResponse",
    "UserSelfUpdate",
    "UserAdminUpdate",
    "MessageResponse",
    # Secret key
    "SecretKeyCreate",
    "SecretKeyUpdate",
    "SecretKeyResponse",
    "GeneratedSecretKey",
]
