"""
Custom middleware for the FastAPI application.
"""
import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.security import api_key_matches

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Reject every request that does not carry the shared API key.

    Runs before routing, so unknown paths and unparsable bodies are
    answered with 401 as well.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not api_key_matches(request.headers.get(API_KEY_HEADER)):
            logger.warning(
                "Rejected %s %s: missing or invalid API key",
                request.method,
                request.url.path,
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"message": "Unauthorized"},
            )
        return await call_next(request)
