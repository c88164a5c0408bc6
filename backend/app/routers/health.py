"""
Liveness and readiness endpoints for the Secret Key API.
"""
import asyncio
import logging

from fastapi import APIRouter, status

from app.config import get_settings
from app.database.connections import get_mongo_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

PING_TIMEOUT_SECONDS = 2.0


@router.get("/health", status_code=status.HTTP_200_OK, summary="Liveness")
async def health_check():
    """The process is up and serving requests."""
    return {"status": "healthy"}


@router.get("/health/ready", status_code=status.HTTP_200_OK, summary="Readiness")
async def readiness_check():
    """
    Ping the MongoDB deployment that holds users and secret keys.

    A failed ping degrades the status instead of failing the request; only the
    exception type is reported back.
    """
    checks = {"api": "healthy", "mongodb": "unknown"}

    try:
        client = await get_mongo_client()
        await asyncio.wait_for(client.admin.command("ping"), PING_TIMEOUT_SECONDS)
        checks["mongodb"] = "healthy"
    except Exception as e:
        logger.warning("Readiness ping failed: %s", type(e).__name__)
        checks["mongodb"] = f"unhealthy: {type(e).__name__}"

    return {
        "status": "healthy" if checks["mongodb"] == "healthy" else "degraded",
        "database": get_settings().mongo_db_name,
        "checks": checks,
    }
