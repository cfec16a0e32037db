"""Drive service protocol (DIP). Implementation: GoogleDriveService."""

from collections.abc import AsyncGenerator
from typing import Protocol

from gallery.domain.entities import DriveFile


class DriveProtocol(Protocol):
    """Read-only subset of the Drive API used by the gallery."""

    async def find_folders(self, name: str, parent_id: str | None = None) -> list[DriveFile]:
        """Return folders named exactly ``name`` (inside ``parent_id`` when given)."""
        ...

    async def list_image_page(
        self,
        parent_id: str,
        page_size: int,
        page_token: str | None = None,
    ) -> tuple[list[DriveFile], str | None]:
        """Return one page of image files in ``parent_id`` and the next page token."""
        ...

    async def get_file(self, file_id: str) -> DriveFile:
        """Return file metadata (id, name, mime type)."""
        ...

    def iter_media(self, file_id: str) -> AsyncGenerator[bytes, None]:
        """Stream the file's raw bytes; closing the generator releases the download."""
        ...
