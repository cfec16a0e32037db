"""Rate limit for every request under /api/.

Runs before routing, so requests that later fail parameter validation and
paths with no matching route are counted too. Raw ASGI.
"""

from typing import Callable

from starlette.requests import Request
from starlette.responses import JSONResponse

from gallery.core.limiter import API_PATH_PREFIX, hit_api_limit
from gallery.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests, please try again later"


def ApiRateLimitMiddleware(app: Callable, prefix: str = API_PATH_PREFIX) -> Callable:
    """Answer 429 once a client exhausts the shared budget for ``prefix`` paths."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or not scope["path"].startswith(prefix):
            await app(scope, receive, send)
            return
        request = Request(scope)
        result = hit_api_limit(request)
        if result.allowed:
            await app(scope, receive, send)
            return
        logger.warning(
            "Rate limit %s exceeded for %s on %s",
            result.limit,
            request.client.host if request.client else "-",
            scope["path"],
        )
        response = JSONResponse(
            status_code=429,
            content={"success": False, "message": RATE_LIMIT_MESSAGE},
            headers={"Retry-After": str(result.retry_after)},
        )
        await response(scope, receive, send)

    return asgi_app
