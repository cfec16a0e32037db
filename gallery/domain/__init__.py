"""Domain: entities and exceptions. No framework or storage concerns."""

from gallery.domain.entities import DriveFile, ImageRef
from gallery.domain.exceptions import (
    FolderNotFoundException,
    GalleryException,
    ImageLookupException,
    ImageNotFoundException,
    ValidationException,
)

__all__ = [
    "DriveFile",
    "ImageRef",
    "GalleryException",
    "ValidationException",
    "FolderNotFoundException",
    "ImageLookupException",
    "ImageNotFoundException",
]
