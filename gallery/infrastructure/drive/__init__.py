"""Google Drive access: credentials, query building and the v3 client.

Implementations follow DriveProtocol (find_folders, list_image_page,
get_file, iter_media). DriveFactory builds the client from settings.
"""

from gallery.infrastructure.drive.factory import DriveFactory
from gallery.infrastructure.drive.protocol import DriveProtocol

__all__ = [
    "DriveFactory",
    "DriveProtocol",
]
