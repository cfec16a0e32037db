"""Image proxy: metadata lookup followed by a primed media stream.

The first chunk is fetched before the HTTP response starts so that a bad id
or an upstream failure still becomes a 404 instead of a truncated body.
"""

import re
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import aclosing
from dataclasses import dataclass

from gallery.domain.exceptions import ImageNotFoundException
from gallery.infrastructure.drive.protocol import DriveProtocol
from gallery.infrastructure.exceptions import DriveException
from gallery.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

DRIVE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,128}$")


@dataclass
class ImageStream:
    """An opened image: its mime type and the body chunks."""

    image_id: str
    mime_type: str
    chunks: AsyncIterator[bytes]


async def _prepend(
    image_id: str, first: bytes, rest: AsyncGenerator[bytes, None]
) -> AsyncIterator[bytes]:
    async with aclosing(rest):
        if first:
            yield first
        try:
            async for chunk in rest:
                yield chunk
        except DriveException as e:
            logger.error(
                "Stream for image %s aborted: %s %s", image_id, e.message, e.details
            )
            raise


class ImageProxyService:
    """Open Drive image files for streaming to clients."""

    def __init__(self, drive: DriveProtocol) -> None:
        self._drive = drive

    async def open_image(self, image_id: str) -> ImageStream:
        """Return an ImageStream for ``image_id``.

        Raises:
            ImageNotFoundException: Invalid id, non-image file, or any upstream failure.
        """
        if not DRIVE_ID_PATTERN.fullmatch(image_id):
            logger.info("Rejected malformed image id %r", image_id[:64])
            raise ImageNotFoundException(image_id[:128])
        try:
            file = await self._drive.get_file(image_id)
            if not file.is_image:
                logger.info("File %s is %s, not an image", image_id, file.mime_type)
                raise ImageNotFoundException(image_id)
            media = self._drive.iter_media(image_id)
            first = await anext(media, b"")
        except ImageNotFoundException:
            raise
        except Exception as e:
            logger.warning("Error fetching image %s: %s", image_id, e)
            raise ImageNotFoundException(image_id) from e
        return ImageStream(
            image_id=image_id,
            mime_type=file.mime_type,
            chunks=_prepend(image_id, first, media),
        )
