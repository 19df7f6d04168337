"""
FastAPI application lifespan management.

The builder holds no long-lived resources, so startup only
configures logging and reports the effective URL defaults.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from urlbuildr.core.config import settings
from urlbuildr.core.logging import setup_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup and log shutdown."""
    # ── Startup ──────────────────────────────────────────────
    setup_logging()
    logger.info(
        "Starting urlbuildr (prefix=%r host=%r port=%s path_prefix=%r)",
        settings.url_prefix,
        settings.url_host,
        settings.url_port,
        settings.url_path_prefix,
    )

    yield

    # ── Shutdown ─────────────────────────────────────────────
    logger.info("Shutdown complete")
