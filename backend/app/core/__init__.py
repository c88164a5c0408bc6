"""
Core module - Security, errors and logging utilities.
"""
from app.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
    generate_secret_key,
)

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "generate_secret_key",
]
