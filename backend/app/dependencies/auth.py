"""
Authentication dependencies for route protection.

The shared API key is enforced by ``ApiKeyMiddleware`` before routing. Two
token guards run per route:

* ``require_user``: JWT from the ``Authorization`` header
* ``require_admin``: like ``require_user`` but the token must carry isAdmin
"""
import logging
from typing import Annotated, Optional

from fastapi import Depends, Header

from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.security import TokenVerificationError, decode_token
from app.schemas.auth import TokenPayload

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """
    Get the token out of an Authorization header value.

    ``Bearer <token>`` is the canonical form; a bare token is accepted too.
    """
    if not authorization:
        return None
    value = authorization.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        return rest.strip() or None
    return value or None


async def require_user(
    authorization: Annotated[Optional[str], Header()] = None,
) -> TokenPayload:
    """
    Dependency returning the verified token payload of the caller.

    Raises:
        UnauthorizedError 401: If the token is missing or fails verification
    """
    token = extract_token(authorization)
    if token is None:
        raise UnauthorizedError("No token provided")

    try:
        return decode_token(token)
    except TokenVerificationError as e:
        logger.warning("Rejected token: %s", type(e).__name__)
        raise UnauthorizedError("Invalid token")


async def require_admin(
    current_user: Annotated[TokenPayload, Depends(require_user)],
) -> TokenPayload:
    """
    Dependency for admin-only routes.

    Raises:
        UnauthorizedError 401: If the token is missing or invalid
        ForbiddenError 403: If the token does not carry the admin flag
    """
    if not current_user.is_admin:
        raise ForbiddenError("Access denied. Admin privileges required.")
    return current_user


# Type aliases for cleaner route signatures
CurrentUser = Annotated[TokenPayload, Depends(require_user)]
AdminUser = Annotated[TokenPayload, Depends(require_admin)]
