"""Domain entities: storage files and the image references handed to clients."""

from dataclasses import dataclass

from gallery.core.constants import FOLDER_MIME_TYPE, IMAGE_MIME_PREFIX, IMAGE_PROXY_PREFIX


@dataclass(frozen=True)
class DriveFile:
    """A file or folder as reported by the storage API."""

    id: str
    name: str
    mime_type: str

    @property
    def is_folder(self) -> bool:
        return self.mime_type == FOLDER_MIME_TYPE

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith(IMAGE_MIME_PREFIX)


@dataclass(frozen=True)
class ImageRef:
    """Image entry of an /api/images response; url points at the proxy route."""

    id: str
    url: str
    type: str

    @classmethod
    def from_file(cls, file: DriveFile) -> "ImageRef":
        return cls(
            id=file.id,
            url=f"{IMAGE_PROXY_PREFIX}/{file.id}",
            type=file.mime_type,
        )
