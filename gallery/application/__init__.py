"""Application layer: gallery lookup and image proxy services."""
