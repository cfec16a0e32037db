"""Drive service factory: builds the Google Drive client from settings."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from gallery.infrastructure.drive.protocol import DriveProtocol

if TYPE_CHECKING:
    from gallery.core.config import Settings


class DriveFactory:
    """Factory for Drive service instances based on configuration."""

    @staticmethod
    def create_drive_service(settings: "Settings | None" = None) -> DriveProtocol:
        """Create the Drive service; credentials load on the first API call.

        Args:
            settings: Application settings; if None, uses get_settings().
        """
        from gallery.core.config import get_settings
        from gallery.infrastructure.drive.client import GoogleDriveService
        from gallery.infrastructure.drive.credentials import load_credentials

        s = settings or get_settings()
        return GoogleDriveService(credentials_loader=partial(load_credentials, s))
