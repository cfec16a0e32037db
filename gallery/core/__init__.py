"""Core: config, constants, exception handlers, rate limiter and lifespan.

Single place for settings and shared constants.
"""

from gallery.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
