"""Cache: the process-wide folder id cache and its key format."""

from gallery.infrastructure.cache.folder_cache import FolderCache, folder_cache
from gallery.infrastructure.cache.keys import folder_path_key

__all__ = [
    "FolderCache",
    "folder_cache",
    "folder_path_key",
]
