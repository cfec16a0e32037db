"""Student Gallery: FastAPI backend that serves student photos from Google Drive."""

__version__ = "1.0.0"
