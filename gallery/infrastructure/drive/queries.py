"""Drive ``q`` search strings. Single place for query syntax and escaping."""

from gallery.core.constants import FOLDER_MIME_TYPE, IMAGE_MIME_PREFIX


def escape_query_value(value: str) -> str:
    """Escape a value for use inside single quotes in a Drive query."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def folder_query(name: str, parent_id: str | None = None) -> str:
    """Query for non-trashed folders named exactly ``name``, optionally inside ``parent_id``."""
    clauses = [
        f"name = '{escape_query_value(name)}'",
        f"mimeType = '{FOLDER_MIME_TYPE}'",
        "trashed = false",
    ]
    if parent_id:
        clauses.append(f"'{escape_query_value(parent_id)}' in parents")
    return " and ".join(clauses)


def image_query(parent_id: str) -> str:
    """Query for non-trashed image files directly inside ``parent_id``."""
    return " and ".join(
        [
            f"'{escape_query_value(parent_id)}' in parents",
            f"mimeType contains '{IMAGE_MIME_PREFIX}'",
            "trashed = false",
        ]
    )
