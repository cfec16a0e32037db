"""API request/response schemas (Pydantic)."""

from gallery.schemas.images import ErrorResponse, ImageRefResponse, ImagesResponse

__all__ = ["ErrorResponse", "ImageRefResponse", "ImagesResponse"]
