"""Folder resolution: Images → {level} → {rollNumber}.

Each step is one Drive lookup by exact name and parent. The shared part of
the hierarchy (root and level folders) is served from the process-wide
FolderCache after the first successful lookup; student folders are looked
up on every request.
"""

from gallery.domain.exceptions import FolderNotFoundException
from gallery.infrastructure.cache import FolderCache, folder_path_key
from gallery.infrastructure.drive.protocol import DriveProtocol
from gallery.shared.enums import Level
from gallery.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class FolderResolver:
    """Resolve the Drive folder id holding a level's or a student's images."""

    def __init__(
        self,
        drive: DriveProtocol,
        cache: FolderCache,
        root_name: str = "Images",
    ) -> None:
        self._drive = drive
        self._cache = cache
        self._root_name = root_name

    async def resolve(self, level: Level, roll_number: str | None = None) -> str:
        """Return the terminal folder id.

        Args:
            level: Level folder under the root.
            roll_number: Student folder under the level folder; when None the
                level folder itself is the terminal folder.

        Raises:
            FolderNotFoundException: A folder in the chain does not exist.
        """
        root_id = await self._resolve_cached((self._root_name,), parent_id=None)
        level_id = await self._resolve_cached(
            (self._root_name, level.value), parent_id=root_id
        )
        if roll_number is None:
            return level_id
        path = folder_path_key(self._root_name, level.value, roll_number)
        return await self._lookup(path, roll_number, parent_id=level_id)

    async def _resolve_cached(self, segments: tuple[str, ...], parent_id: str | None) -> str:
        key = folder_path_key(*segments)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        folder_id = await self._lookup(key, segments[-1], parent_id=parent_id)
        self._cache.set(key, folder_id)
        return folder_id

    async def _lookup(self, path: str, name: str, parent_id: str | None) -> str:
        folders = await self._drive.find_folders(name, parent_id)
        if not folders:
            raise FolderNotFoundException(path)
        if len(folders) > 1:
            logger.warning(
                "%s folders named %s; using %s", len(folders), path, folders[0].id
            )
        return folders[0].id
