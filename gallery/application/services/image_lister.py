"""List the image files of a folder as ImageRefs (capped)."""

from gallery.core.constants import DRIVE_PAGE_SIZE
from gallery.domain.entities import DriveFile, ImageRef
from gallery.infrastructure.drive.protocol import DriveProtocol
from gallery.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_IMAGES = 10_000


class ImageLister:
    """Page through a folder's images until the cap or the last page."""

    def __init__(
        self,
        drive: DriveProtocol,
        max_images: int = DEFAULT_MAX_IMAGES,
        page_size: int = DRIVE_PAGE_SIZE,
    ) -> None:
        self._drive = drive
        self._max_images = max_images
        self._page_size = min(page_size, max_images)

    async def list_images(self, folder_id: str) -> list[ImageRef]:
        """Return at most max_images refs, in the order the Drive API lists them."""
        files: list[DriveFile] = []
        page_token: str | None = None
        while len(files) < self._max_images:
            page, page_token = await self._drive.list_image_page(
                folder_id, self._page_size, page_token
            )
            files.extend(f for f in page if f.is_image)
            if not page_token:
                break
        if len(files) > self._max_images:
            logger.info(
                "Folder %s has more than %s images; truncating",
                folder_id,
                self._max_images,
            )
        return [ImageRef.from_file(f) for f in files[: self._max_images]]
