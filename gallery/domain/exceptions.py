"""Domain exceptions for the gallery.

Presentation maps them to HTTP responses in gallery.core.exception_handlers.
"""

from typing import Any


class GalleryException(Exception):
    """Base exception for all gallery errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (never sent to clients).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the client-facing error body."""
        return {"success": False, "message": self.message}


class ValidationException(GalleryException):
    """Raised when request input fails a presence or format check."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class FolderNotFoundException(GalleryException):
    """Raised when a folder in the Images/{level}/{rollNumber} chain does not exist.

    Callers treat it as "no images"; it is never surfaced to clients.
    """

    def __init__(self, path: str) -> None:
        super().__init__(
            f"{path} folder not found",
            "FOLDER_NOT_FOUND",
            {"path": path},
        )


class ImageLookupException(GalleryException):
    """Raised when resolving or listing images fails (timeout, upstream error)."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            "Error retrieving images",
            "IMAGE_LOOKUP_ERROR",
            {"reason": reason},
        )


class ImageNotFoundException(GalleryException):
    """Raised when the proxy cannot serve a file (bad id, not an image, upstream failure)."""

    def __init__(self, image_id: str) -> None:
        super().__init__(
            "Image not found",
            "IMAGE_NOT_FOUND",
            {"image_id": image_id},
        )
