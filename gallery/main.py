"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See gallery.core.lifespan and
gallery.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, PlainTextResponse

from gallery.api import api_router
from gallery.core.config import get_settings
from gallery.core.constants import ROLL_NUMBER_LENGTH
from gallery.core.exception_handlers import register_exception_handlers
from gallery.core.lifespan import create_lifespan
from gallery.middleware import (
    ApiRateLimitMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
)
from gallery.middleware.security_headers import (
    DEFAULT_HEADERS,
    build_content_security_policy,
)
from gallery.pages import render_gallery_page


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # Middleware: last added = outermost.
    # Order: request ID → security headers → CORS → /api/ rate limit.
    app.add_middleware(ApiRateLimitMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    security_headers = {
        **DEFAULT_HEADERS,
        "Content-Security-Policy": build_content_security_policy(
            [settings.api_base_url.rstrip("/")]
        ),
    }
    app.add_middleware(SecurityHeadersMiddleware, headers=security_headers)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api")

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        """Plain-text liveness response."""
        return "this is home page"

    @app.get("/gallery", response_class=HTMLResponse)
    def gallery_page() -> HTMLResponse:
        """Student lookup form with image grid and lightbox."""
        return HTMLResponse(
            content=render_gallery_page(
                settings.app_name,
                api_base=settings.api_base_url,
                roll_number_length=ROLL_NUMBER_LENGTH,
            )
        )

    return app


app = create_app()
