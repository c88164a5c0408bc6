"""
API Routers module.
"""
from app.routers import health, secret_keys, users

__all__ = ["health", "secret_keys", "users"]
