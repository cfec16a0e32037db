"""API dependencies (composition root): input validation and service wiring.

Tests replace get_drive_service and get_folder_cache through
app.dependency_overrides.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Query

from gallery.application.services import (
    FolderResolver,
    GalleryService,
    ImageLister,
    ImageProxyService,
)
from gallery.core.config import Settings, get_settings
from gallery.core.constants import ROLL_NUMBER_LENGTH
from gallery.domain.exceptions import ValidationException
from gallery.infrastructure.cache import FolderCache, folder_cache
from gallery.infrastructure.drive import DriveFactory, DriveProtocol
from gallery.shared.enums import Level

ROLL_NUMBER_PATTERN = re.compile(r"^[0-9]{%d}$" % ROLL_NUMBER_LENGTH)


@dataclass(frozen=True)
class ImageQuery:
    """Validated /api/images parameters."""

    level: Level
    roll_number: str | None = None


def validate_image_query(
    settings: Annotated[Settings, Depends(get_settings)],
    level: Annotated[str | None, Query(description="UG, PG or PHD")] = None,
    roll_number: Annotated[
        str | None,
        Query(alias="rollNumber", description="Exactly 10 digits"),
    ] = None,
) -> ImageQuery:
    """Reject missing or malformed parameters before any Drive call.

    Level is checked first, so an invalid level is a 400 whatever the roll
    number. The roll number is mandatory only when REQUIRE_ROLL_NUMBER is set,
    but a supplied one must always be exactly 10 digits.
    """
    if not level:
        raise ValidationException("Level is required", field="level")
    if level not in Level.values():
        raise ValidationException(
            f"Level must be one of: {', '.join(Level.values())}", field="level"
        )
    if not roll_number:
        if settings.require_roll_number:
            raise ValidationException("Roll number is required", field="rollNumber")
        return ImageQuery(level=Level(level))
    if not ROLL_NUMBER_PATTERN.fullmatch(roll_number):
        raise ValidationException(
            f"Roll number must be exactly {ROLL_NUMBER_LENGTH} digits",
            field="rollNumber",
        )
    return ImageQuery(level=Level(level), roll_number=roll_number)


@lru_cache
def _default_drive_service() -> DriveProtocol:
    return DriveFactory.create_drive_service()


def get_drive_service() -> DriveProtocol:
    """Process-wide Drive client (credentials load on first API call)."""
    return _default_drive_service()


def get_folder_cache() -> FolderCache:
    """Process-wide folder id cache."""
    return folder_cache


def get_gallery_service(
    drive: Annotated[DriveProtocol, Depends(get_drive_service)],
    cache: Annotated[FolderCache, Depends(get_folder_cache)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> GalleryService:
    """Gallery service for one request."""
    resolver = FolderResolver(drive, cache, root_name=settings.drive_root_folder)
    lister = ImageLister(drive, max_images=settings.max_images)
    return GalleryService(
        resolver,
        lister,
        timeout_seconds=settings.lookup_timeout_seconds,
    )


def get_image_proxy_service(
    drive: Annotated[DriveProtocol, Depends(get_drive_service)],
) -> ImageProxyService:
    """Image proxy service for one request."""
    return ImageProxyService(drive)
