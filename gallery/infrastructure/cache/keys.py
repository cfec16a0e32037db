"""Folder cache key builders. Single place for key format.

Keys are folder paths ("Images", "Images/UG"); segments must not contain
FOLDER_PATH_SEP to avoid colliding keys.
"""

from gallery.core.constants import FOLDER_PATH_SEP


def folder_path_key(*segments: str) -> str:
    """Cache key for the folder reached by walking ``segments`` from the Drive root.

    Raises:
        ValueError: If no segment is given, or one is empty or contains the separator.
    """
    if not segments:
        raise ValueError("At least one path segment is required")
    for segment in segments:
        if not segment or FOLDER_PATH_SEP in segment:
            raise ValueError(f"Invalid folder path segment: {segment!r}")
    return FOLDER_PATH_SEP.join(segments)
