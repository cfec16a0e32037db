"""Pytest configuration and fixtures for the gallery.

HTTP tests run against gallery.main:app over ASGITransport. Drive access is
replaced by tests.fakes.FakeDrive and the process-wide folder cache by a
fresh FolderCache per test (dependency_overrides). The shared rate limiter
is reset around every test.
"""

import os

# Must be set before gallery.main builds the app (CORS origins are read at startup).
os.environ.setdefault("FRONTEND_URL", "http://frontend.test")
os.environ.setdefault("GOOGLE_CREDENTIALS_FILE", "/nonexistent/credentials.json")

from collections.abc import Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from gallery.api.dependencies import get_drive_service, get_folder_cache  # noqa: E402
from gallery.core.config import Settings, get_settings  # noqa: E402
from gallery.core.limiter import limiter  # noqa: E402
from gallery.infrastructure.cache import FolderCache  # noqa: E402
from gallery.main import app  # noqa: E402
from tests.fakes import FakeDrive  # noqa: E402

get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_rate_limiter() -> None:
    """Every test starts with a full rate-limit budget."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def drive() -> FakeDrive:
    """Drive with Images/UG/1234567890 (3 images, 1 PDF) and an empty Images/PG."""
    return FakeDrive.with_gallery()


@pytest.fixture
def folder_cache() -> FolderCache:
    return FolderCache()


@pytest.fixture
def override_settings() -> Callable[..., Settings]:
    """Return a function that swaps request-time settings for the test's duration."""

    def _override(**values: Any) -> Settings:
        settings = Settings(**values)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    return _override


@pytest.fixture
async def client(drive: FakeDrive, folder_cache: FolderCache) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) backed by the fake Drive."""
    app.dependency_overrides[get_drive_service] = lambda: drive
    app.dependency_overrides[get_folder_cache] = lambda: folder_cache
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
