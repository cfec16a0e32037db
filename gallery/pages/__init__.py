"""Server-rendered HTML pages."""

from gallery.pages.gallery import render_gallery_page

__all__ = ["render_gallery_page"]
