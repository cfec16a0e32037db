"""Google Drive v3 client (read-only) for folder lookup, image listing and media download.

Uses google-api-python-client (sync) via asyncio.to_thread for an async API.
The discovery client's HTTP transport is not thread-safe, so every worker
thread builds its own service object and each media download gets a
dedicated one.
"""

from __future__ import annotations

import asyncio
import io
import threading
from collections.abc import AsyncGenerator, Callable
from typing import Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseDownload

from gallery.core.constants import DRIVE_DOWNLOAD_CHUNK_SIZE
from gallery.domain.entities import DriveFile
from gallery.infrastructure.drive.queries import folder_query, image_query
from gallery.infrastructure.exceptions import DriveException, DriveRequestError
from gallery.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

FILE_FIELDS = "id, name, mimeType"
LIST_FIELDS = f"nextPageToken, files({FILE_FIELDS})"


def _to_file(raw: dict[str, Any]) -> DriveFile:
    return DriveFile(
        id=raw["id"],
        name=raw.get("name", ""),
        mime_type=raw.get("mimeType", ""),
    )


class GoogleDriveService:
    """Drive API access with lazily loaded service-account credentials."""

    def __init__(
        self,
        credentials_loader: Callable[[], service_account.Credentials],
        chunk_size: int = DRIVE_DOWNLOAD_CHUNK_SIZE,
    ) -> None:
        """Initialize without touching the network or the key material.

        Args:
            credentials_loader: Returns credentials; called on first use.
            chunk_size: Media download chunk size in bytes.
        """
        self._credentials_loader = credentials_loader
        self._credentials: service_account.Credentials | None = None
        self._chunk_size = chunk_size
        self._local = threading.local()

    def _get_credentials(self) -> service_account.Credentials:
        if self._credentials is None:
            self._credentials = self._credentials_loader()
        return self._credentials

    def _build_service(self) -> Any:
        return build(
            "drive",
            "v3",
            credentials=self._get_credentials(),
            cache_discovery=False,
        )

    def _thread_service(self) -> Any:
        service = getattr(self._local, "service", None)
        if service is None:
            service = self._build_service()
            self._local.service = service
        return service

    async def _execute(
        self, operation: str, make_request: Callable[[Any], Any]
    ) -> dict[str, Any]:
        """Build the request on a worker thread's service and execute it there."""

        def _run() -> dict[str, Any]:
            return make_request(self._thread_service()).execute()

        try:
            return await asyncio.to_thread(_run)
        except DriveException:
            raise
        except HttpError as e:
            raise DriveRequestError(operation, str(e), status=e.resp.status) from e
        except Exception as e:
            raise DriveRequestError(operation, str(e)) from e

    async def find_folders(self, name: str, parent_id: str | None = None) -> list[DriveFile]:
        """Return non-trashed folders named exactly ``name``."""
        query = folder_query(name, parent_id)
        logger.debug("Drive folder lookup: %s", query)
        result = await self._execute(
            "files.list",
            lambda service: service.files().list(
                q=query,
                fields=f"files({FILE_FIELDS})",
                spaces="drive",
            ),
        )
        return [_to_file(f) for f in result.get("files", [])]

    async def list_image_page(
        self,
        parent_id: str,
        page_size: int,
        page_token: str | None = None,
    ) -> tuple[list[DriveFile], str | None]:
        """Return one page of image files in ``parent_id`` plus the next page token."""
        query = image_query(parent_id)
        result = await self._execute(
            "files.list",
            lambda service: service.files().list(
                q=query,
                fields=LIST_FIELDS,
                spaces="drive",
                pageSize=page_size,
                pageToken=page_token,
            ),
        )
        files = [_to_file(f) for f in result.get("files", [])]
        return files, result.get("nextPageToken")

    async def get_file(self, file_id: str) -> DriveFile:
        """Return metadata for one file."""
        result = await self._execute(
            "files.get",
            lambda service: service.files().get(fileId=file_id, fields=FILE_FIELDS),
        )
        return _to_file(result)

    async def iter_media(self, file_id: str) -> AsyncGenerator[bytes, None]:
        """Stream file content chunk by chunk.

        The dedicated service's HTTP transport is closed when the stream
        ends, fails, or is closed early (client disconnect).
        """
        try:
            service = await asyncio.to_thread(self._build_service)
        except DriveException:
            raise
        except Exception as e:
            raise DriveRequestError("files.get_media", str(e)) from e

        try:
            buffer = io.BytesIO()
            downloader = MediaIoBaseDownload(
                buffer,
                service.files().get_media(fileId=file_id),
                chunksize=self._chunk_size,
            )
            done = False
            while not done:
                try:
                    _, done = await asyncio.to_thread(downloader.next_chunk)
                except HttpError as e:
                    raise DriveRequestError(
                        "files.get_media", str(e), status=e.resp.status
                    ) from e
                except Exception as e:
                    raise DriveRequestError("files.get_media", str(e)) from e
                chunk = buffer.getvalue()
                buffer.seek(0)
                buffer.truncate()
                if chunk:
                    yield chunk
        finally:
            service.close()
