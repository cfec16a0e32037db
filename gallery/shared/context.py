"""Request context using contextvars.

The request ID middleware sets the current request id here; the logging
filter in gallery.shared.telemetry.logging reads it so every log line
written while serving a request carries that id. Worker threads started
with asyncio.to_thread inherit the value.
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def set_request_id(request_id: str | None) -> Token:
    """Set the request id for this context; returns a token for reset_request_id."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return _current_request_id.get()
