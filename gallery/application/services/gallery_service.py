"""Gallery lookup: resolve the student's folder and list its images under a timeout."""

import asyncio

from gallery.application.services.folder_resolver import FolderResolver
from gallery.application.services.image_lister import ImageLister
from gallery.domain.entities import ImageRef
from gallery.domain.exceptions import FolderNotFoundException, ImageLookupException
from gallery.infrastructure.exceptions import DriveException
from gallery.shared.enums import Level
from gallery.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class GalleryService:
    """Resolve-then-list, raced against a fixed timeout.

    A missing folder anywhere in the chain yields an empty list. Timeouts and
    Drive failures raise ImageLookupException (mapped to a generic 500).
    """

    def __init__(
        self,
        resolver: FolderResolver,
        lister: ImageLister,
        timeout_seconds: float = 30.0,
    ) -> None:
        self._resolver = resolver
        self._lister = lister
        self._timeout_seconds = timeout_seconds

    async def find_images(self, level: Level, roll_number: str | None = None) -> list[ImageRef]:
        try:
            return await asyncio.wait_for(
                self._find(level, roll_number), timeout=self._timeout_seconds
            )
        except asyncio.TimeoutError as e:
            logger.warning(
                "Image lookup for %s/%s timed out after %s seconds",
                level.value,
                roll_number,
                self._timeout_seconds,
            )
            raise ImageLookupException("timeout") from e
        except DriveException as e:
            logger.error(
                "Image lookup for %s/%s failed: %s %s",
                level.value,
                roll_number,
                e.message,
                e.details,
            )
            raise ImageLookupException(e.error_code) from e

    async def _find(self, level: Level, roll_number: str | None) -> list[ImageRef]:
        try:
            folder_id = await self._resolver.resolve(level, roll_number)
        except FolderNotFoundException as e:
            logger.info("%s; returning no images", e.message)
            return []
        images = await self._lister.list_images(folder_id)
        logger.info(
            "Found %s images for %s/%s", len(images), level.value, roll_number
        )
        return images
