"""Image API: gallery lookup and the byte-stream proxy."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from gallery.api.dependencies import (
    ImageQuery,
    get_gallery_service,
    get_image_proxy_service,
    validate_image_query,
)
from gallery.application.services import GalleryService, ImageProxyService
from gallery.core.config import Settings, get_settings
from gallery.schemas.images import ErrorResponse, ImageRefResponse, ImagesResponse

router = APIRouter()


@router.get(
    "/images",
    response_model=ImagesResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid level/roll number"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
        500: {"model": ErrorResponse, "description": "Lookup timed out or Drive failed"},
    },
)
async def list_images(
    query: Annotated[ImageQuery, Depends(validate_image_query)],
    gallery_svc: Annotated[GalleryService, Depends(get_gallery_service)],
):
    """Return proxy URLs of the images in Images/{level}[/{rollNumber}]."""
    images = await gallery_svc.find_images(query.level, query.roll_number)
    return ImagesResponse(
        level=query.level.value,
        roll_number=query.roll_number,
        images=[ImageRefResponse.from_entity(image) for image in images],
    )


@router.get(
    "/image/{image_id}",
    response_class=StreamingResponse,
    responses={
        200: {"content": {"image/*": {}}, "description": "Raw image bytes"},
        404: {"model": ErrorResponse, "description": "Unknown id or upstream failure"},
    },
)
async def proxy_image(
    image_id: str,
    proxy_svc: Annotated[ImageProxyService, Depends(get_image_proxy_service)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Stream a Drive image with 24h caching and cross-origin headers."""
    stream = await proxy_svc.open_image(image_id)
    return StreamingResponse(
        stream.chunks,
        media_type=stream.mime_type,
        headers={
            "Cache-Control": f"public, max-age={settings.image_cache_max_age}",
            "Content-Disposition": "inline",
            "Access-Control-Allow-Origin": settings.proxy_allow_origin,
            "Access-Control-Allow-Methods": "GET",
            "Cross-Origin-Resource-Policy": "cross-origin",
        },
    )
