"""Endpoint modules; aggregated in gallery.api.router."""
