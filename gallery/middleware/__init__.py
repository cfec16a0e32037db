"""HTTP middleware: request ID, security headers and the /api/ rate limit.

Applied in main app; order matters (last added = outermost).
"""

from gallery.middleware.rate_limit import ApiRateLimitMiddleware
from gallery.middleware.request_id import RequestIDMiddleware
from gallery.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "ApiRateLimitMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
