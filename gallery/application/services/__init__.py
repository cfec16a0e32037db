"""Application services. Built per request by gallery.api.dependencies."""

from gallery.application.services.folder_resolver import FolderResolver
from gallery.application.services.gallery_service import GalleryService
from gallery.application.services.image_lister import ImageLister
from gallery.application.services.image_proxy import ImageProxyService, ImageStream

__all__ = [
    "FolderResolver",
    "GalleryService",
    "ImageLister",
    "ImageProxyService",
    "ImageStream",
]
