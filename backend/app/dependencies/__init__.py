"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.auth import (
    require_user,
    require_admin,
    CurrentUser,
    AdminUser,
)

__all__ = [
    "require_user",
    "require_admin",
    "CurrentUser",
    "AdminUser",
]
