"""Infrastructure exceptions for Google Drive operations.

Drive errors extend GalleryException so services and presentation can map
them consistently.
"""

from gallery.domain.exceptions import GalleryException


class DriveException(GalleryException):
    """Base exception for Drive operations."""


class DriveConfigurationError(DriveException):
    """Service-account credentials are missing or invalid."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Google Drive is not configured: {reason}",
            "DRIVE_CONFIGURATION_ERROR",
            {"reason": reason},
        )


class DriveRequestError(DriveException):
    """A Drive API call failed (HTTP error status or transport failure)."""

    def __init__(self, operation: str, reason: str, status: int | None = None) -> None:
        super().__init__(
            f"Drive request failed: {operation}",
            "DRIVE_REQUEST_ERROR",
            {"operation": operation, "reason": reason, "status": status},
        )
        self.status = status
