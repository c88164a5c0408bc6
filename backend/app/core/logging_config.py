"""
Logging setup for the API process.
"""
import logging

from app.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the process."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
