"""HTTP API: routers and dependencies."""

from gallery.api.router import api_router

__all__ = ["api_router"]
