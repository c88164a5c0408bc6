"""
Security utilities for password hashing, JWT token management and secret
key generation.
"""
import secrets
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from app.config import get_settings
from app.schemas.auth import TokenPayload

SECRET_KEY_BYTES = 32


class TokenVerificationError(Exception):
    """Base class for token verification failures."""


class MalformedTokenError(TokenVerificationError):
    """Token cannot be decoded or carries an unusable payload."""


class InvalidSignatureError(TokenVerificationError):
    """Token signature does not match the configured secret."""


class TokenExpiredError(TokenVerificationError):
    """Token carries an exp claim in the past."""


@lru_cache
def get_pwd_context() -> CryptContext:
    """Password hashing context using bcrypt."""
    settings = get_settings()
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.bcrypt_rounds,
    )


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt with a random salt.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return get_pwd_context().hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Returns False for hashes that passlib cannot identify.
    """
    try:
        return get_pwd_context().verify(plain_password, hashed_password)
    except ValueError:
        return False


def generate_secret_key() -> str:
    """Return 32 cryptographically random bytes, hex encoded (64 chars)."""
    return secrets.token_hex(SECRET_KEY_BYTES)


def api_key_matches(provided: Optional[str]) -> bool:
    """
    Check a client-supplied API key against the configured one.

    An empty configured key never matches.
    """
    expected = get_settings().api_secret_key
    if not provided or not expected:
        return False
    return secrets.compare_digest(provided.encode(), expected.encode())


def create_access_token(
    user_id: str,
    is_admin: bool,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed JWT carrying the subject id and admin flag.

    Args:
        user_id: Unique user identifier
        is_admin: Whether the subject has admin privileges
        expires_delta: Optional lifetime; falls back to the configured one.
            Without either, the token does not expire.

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()

    if expires_delta is None and settings.jwt_access_token_expire_minutes:
        expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)

    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "id": user_id,
        "isAdmin": bool(is_admin),
        "iat": now,
    }
    if expires_delta is not None:
        payload["exp"] = now + expires_delta

    return jwt.encode(
        payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> TokenPayload:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token string to decode

    Returns:
        Verified token payload

    Raises:
        MalformedTokenError: If the token cannot be decoded or has no subject id
        InvalidSignatureError: If the signature does not match
        TokenExpiredError: If the token carries an expired exp claim
    """
    settings = get_settings()

    try:
        jwt.get_unverified_header(token)
        jwt.get_unverified_claims(token)
    except JWTError as exc:
        raise MalformedTokenError(str(exc)) from exc

    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except ExpiredSignatureError as exc:
        raise TokenExpiredError(str(exc)) from exc
    except JWTError as exc:
        raise InvalidSignatureError(str(exc)) from exc

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as exc:
        raise MalformedTokenError("Token payload is missing required claims") from exc
