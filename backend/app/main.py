"""
Secret Key API - FastAPI Application

Generates and stores per-user secret keys, with user accounts, favorites,
API key and JWT access control.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.core.exceptions import register_exception_handlers
from app.core.logging_config import configure_logging
from app.core.middleware import ApiKeyMiddleware
from app.database.connections import close_connections, get_database
from app.database.registry import create_indexes
from app.routers import health, secret_keys, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Initialize database connection
    - Create indexes

    Shutdown:
    - Close the database connection
    """
    configure_logging()
    logger.info("Starting up Secret Key API...")

    if not get_settings().api_secret_key:
        logger.warning("API_SECRET_KEY is not set; every request will be rejected")

    try:
        db = await get_database()
        await create_indexes(db)
        logger.info("Database indexes created")
    except Exception as e:
        logger.warning("Database initialization warning: %s", e)

    yield

    logger.info("Shutting down Secret Key API...")
    await close_connections()
    logger.info("Database connections closed")


# Create FastAPI application
app = FastAPI(
    title="Secret Key API",
    description="""
## Secret Key Generator API

### Features
- **Secret keys**: Generate random 256-bit secrets and keep titled ones per user
- **Users**: Registration, login, self-service profile and favorites
- **Admin**: Manage all user accounts

### Authentication
Every request must carry the shared API key:
```
X-API-Key: your_api_key
```

Protected endpoints also require a JWT obtained via `POST /api/users/login`:
```
Authorization: Bearer your_jwt_token
```
    """,
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Middleware: CORS outermost, then the API key gate
settings = get_settings()
app.add_middleware(ApiKeyMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(secret_keys.router, prefix=settings.api_prefix)
app.include_router(users.router, prefix=settings.api_prefix)


@app.get("/", tags=["Root"])
async def root():
    """Welcome endpoint."""
    return {"message": "Welcome to the API!"}


def run() -> None:
    """Run the API with uvicorn using the configured host and port."""
    import uvicorn

    configure_logging()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
