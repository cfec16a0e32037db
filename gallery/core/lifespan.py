"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. Used by main.py; no business
logic here, only logging setup and a configuration summary.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from gallery.core.config import get_settings
from gallery.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


def _credentials_source() -> str:
    settings = get_settings()
    if settings.google_service_account_key:
        return "GOOGLE_SERVICE_ACCOUNT_KEY"
    if settings.google_cloud_private_key:
        return "GOOGLE_CLOUD_CLIENT_EMAIL/GOOGLE_CLOUD_PRIVATE_KEY"
    return f"key file {settings.google_credentials_file}"


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and log the effective configuration (no secrets)."""
    settings = get_settings()
    setup_logging()
    logger.info(
        "%s %s starting: root folder %r, roll number %s, max %s images, timeout %ss",
        settings.app_name,
        settings.app_version,
        settings.drive_root_folder,
        "required" if settings.require_roll_number else "optional",
        settings.max_images,
        settings.lookup_timeout_seconds,
    )
    logger.info("Drive credentials: %s", _credentials_source())
    if not settings.cors_origins:
        logger.warning("FRONTEND_URL/ALLOWED_ORIGINS not set; cross-origin requests are refused")

    yield

    logger.info("%s shutting down", settings.app_name)
