"""Security headers middleware.

Adds CSP and related response headers. Images may come from this origin,
data: URLs and Google Drive hosts; resources are shareable cross-origin so
the separately hosted frontend can embed proxied images. Headers a route
already set win. Raw ASGI (no BaseHTTPMiddleware) so streamed bodies pass
through untouched.
"""

from typing import Callable


def build_content_security_policy(api_origins: list[str] | None = None) -> str:
    """CSP for the gallery page; api_origins are extra hosts it may fetch images from."""
    extra = " ".join(o for o in (api_origins or []) if o)
    sources = f"'self' {extra}".strip()
    return "; ".join(
        [
            "default-src 'self'",
            f"img-src {sources} data: https://drive.google.com https://*.googleusercontent.com https://placehold.co",
            "script-src 'self' 'unsafe-inline'",
            "style-src 'self' 'unsafe-inline'",
            f"connect-src {sources}",
            "object-src 'none'",
            "base-uri 'self'",
            "frame-ancestors 'self'",
        ]
    )


DEFAULT_HEADERS = {
    "Content-Security-Policy": build_content_security_policy(),
    "Cross-Origin-Resource-Policy": "cross-origin",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None
) -> Callable:
    """Set security headers on all responses. Raw ASGI."""
    resolved = headers if headers is not None else DEFAULT_HEADERS.copy()
    header_list = [(k.encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                for name_b, value_b in header_list:
                    if name_b.lower() not in seen:
                        headers.append((name_b, value_b))
                        seen.add(name_b.lower())
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
