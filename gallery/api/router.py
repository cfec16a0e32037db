"""API router aggregation. Mounted under /api by gallery.main."""

from fastapi import APIRouter

from gallery.api.endpoints import images

api_router = APIRouter()

api_router.include_router(images.router, tags=["images"])
