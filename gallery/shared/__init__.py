"""Shared utilities: enums and logging. No business logic."""

from gallery.shared.enums import Level

__all__ = ["Level"]
