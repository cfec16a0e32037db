"""Rate limiter instance for SlowAPI.

Shared by the /api/ rate-limit middleware and tests (limiter.reset()).
Every request under /api/ (known route or not, valid parameters or not)
draws from one per-IP budget in the "api" scope.
"""

import time
from dataclasses import dataclass

from limits import parse
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from gallery.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)

API_LIMIT_SCOPE = "api"
API_PATH_PREFIX = "/api/"


@dataclass(frozen=True)
class RateLimitResult:
    """Outcome of counting one request against the /api/ budget."""

    allowed: bool
    limit: str
    retry_after: int = 0


def hit_api_limit(request: Request) -> RateLimitResult:
    """Count ``request`` against its client's shared /api/ budget.

    The limit string (e.g. "100 per 15 minutes") is read from settings on
    every call so tests and deployments can change RATE_LIMIT.
    """
    limit = get_settings().rate_limit
    if not limiter.enabled:
        return RateLimitResult(allowed=True, limit=limit)
    item = parse(limit)
    key = get_remote_address(request)
    if limiter.limiter.hit(item, key, API_LIMIT_SCOPE):
        return RateLimitResult(allowed=True, limit=limit)
    reset_time, _ = limiter.limiter.get_window_stats(item, key, API_LIMIT_SCOPE)
    return RateLimitResult(
        allowed=False,
        limit=limit,
        retry_after=max(1, int(reset_time - time.time())),
    )
