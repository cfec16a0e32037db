"""Shared telemetry: logging setup and the request id log filter."""

from gallery.shared.telemetry.logging import RequestIdFilter, get_logger, setup_logging

__all__ = ["RequestIdFilter", "setup_logging", "get_logger"]
