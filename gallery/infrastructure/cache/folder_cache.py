"""Process-wide folder id cache.

Maps a folder path key to its Drive folder id for the lifetime of the
process. Entries are never evicted or invalidated: a folder renamed or
recreated while the process runs keeps resolving to the old id until
restart. Writes are idempotent (same path, same id), so concurrent
requests share the dict without a lock.
"""

from gallery.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class FolderCache:
    """Path → folder id mapping."""

    def __init__(self) -> None:
        self._ids: dict[str, str] = {}

    def get(self, path: str) -> str | None:
        return self._ids.get(path)

    def set(self, path: str, folder_id: str) -> None:
        if self._ids.get(path) != folder_id:
            logger.debug("Caching folder %s -> %s", path, folder_id)
        self._ids[path] = folder_id

    def __contains__(self, path: object) -> bool:
        return path in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the current entries."""
        return dict(self._ids)


folder_cache = FolderCache()
