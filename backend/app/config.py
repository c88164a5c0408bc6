"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "skg_db"

    # JWT Configuration
    jwt_secret_key: str = Field(
        default="CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET",
        validation_alias=AliasChoices("jwt_secret_key", "jwt_secret"),
    )
    jwt_algorithm: str = "HS256"
    # None or 0 issues tokens without an exp claim
    jwt_access_token_expire_minutes: Optional[int] = None

    # Shared API key required on every request (X-API-Key header)
    api_secret_key: str = ""
    api_prefix: str = "/api"

    # Users
    bcrypt_rounds: int = 10
    allow_admin_registration: bool = True

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
