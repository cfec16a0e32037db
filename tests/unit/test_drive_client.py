"""Tests for GoogleDriveService with the discovery client mocked."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from googleapiclient.errors import HttpError

from gallery.infrastructure.drive.client import GoogleDriveService
from gallery.infrastructure.exceptions import DriveConfigurationError, DriveRequestError

CREDENTIALS = object()


@pytest.fixture
def service_mock():
    """Patch build() and return the Drive service mock it hands out."""
    service = MagicMock()
    with patch("gallery.infrastructure.drive.client.build", return_value=service) as m_build:
        service.build_mock = m_build
        yield service


def _drive() -> GoogleDriveService:
    return GoogleDriveService(credentials_loader=lambda: CREDENTIALS, chunk_size=2)


def _http_error(status: int) -> HttpError:
    return HttpError(SimpleNamespace(status=status, reason="Error"), b"upstream says no")


async def test_credentials_load_lazily(service_mock) -> None:
    loader = MagicMock(return_value=CREDENTIALS)
    GoogleDriveService(credentials_loader=loader)
    loader.assert_not_called()
    service_mock.build_mock.assert_not_called()


async def test_find_folders(service_mock) -> None:
    service_mock.files.return_value.list.return_value.execute.return_value = {
        "files": [
            {"id": "f1", "name": "UG", "mimeType": "application/vnd.google-apps.folder"}
        ]
    }
    folders = await _drive().find_folders("UG", "root1")
    assert [(f.id, f.name, f.is_folder) for f in folders] == [("f1", "UG", True)]
    service_mock.files.return_value.list.assert_called_once_with(
        q=(
            "name = 'UG' and mimeType = 'application/vnd.google-apps.folder' "
            "and trashed = false and 'root1' in parents"
        ),
        fields="files(id, name, mimeType)",
        spaces="drive",
    )
    service_mock.build_mock.assert_called_once_with(
        "drive", "v3", credentials=CREDENTIALS, cache_discovery=False
    )


async def test_list_image_page_passes_paging(service_mock) -> None:
    service_mock.files.return_value.list.return_value.execute.return_value = {
        "files": [{"id": "i1", "name": "a.jpg", "mimeType": "image/jpeg"}],
        "nextPageToken": "tok2",
    }
    files, token = await _drive().list_image_page("student", 50, "tok1")
    assert [f.id for f in files] == ["i1"]
    assert token == "tok2"
    kwargs = service_mock.files.return_value.list.call_args.kwargs
    assert kwargs["pageSize"] == 50
    assert kwargs["pageToken"] == "tok1"
    assert kwargs["fields"] == "nextPageToken, files(id, name, mimeType)"


async def test_last_page_has_no_token(service_mock) -> None:
    service_mock.files.return_value.list.return_value.execute.return_value = {"files": []}
    assert await _drive().list_image_page("student", 50) == ([], None)


async def test_get_file(service_mock) -> None:
    service_mock.files.return_value.get.return_value.execute.return_value = {
        "id": "i1",
        "name": "a.png",
        "mimeType": "image/png",
    }
    file = await _drive().get_file("i1")
    assert file.mime_type == "image/png"
    service_mock.files.return_value.get.assert_called_once_with(
        fileId="i1", fields="id, name, mimeType"
    )


async def test_http_error_maps_to_drive_request_error(service_mock) -> None:
    service_mock.files.return_value.get.return_value.execute.side_effect = _http_error(404)
    with pytest.raises(DriveRequestError) as exc_info:
        await _drive().get_file("missing")
    assert exc_info.value.status == 404
    assert exc_info.value.details["operation"] == "files.get"


async def test_transport_error_maps_to_drive_request_error(service_mock) -> None:
    service_mock.files.return_value.list.return_value.execute.side_effect = OSError("reset")
    with pytest.raises(DriveRequestError) as exc_info:
        await _drive().find_folders("Images")
    assert exc_info.value.status is None


async def test_configuration_error_passes_through(service_mock) -> None:
    def _fail():
        raise DriveConfigurationError("credentials file not found: x")

    drive = GoogleDriveService(credentials_loader=_fail)
    with pytest.raises(DriveConfigurationError):
        await drive.find_folders("Images")


async def test_iter_media_yields_each_chunk(service_mock) -> None:
    class FakeDownload:
        def __init__(self, fd, request, chunksize):
            self._fd = fd
            self._parts = [b"ab", b"cd", b"e"]
            assert chunksize == 2

        def next_chunk(self):
            self._fd.write(self._parts.pop(0))
            return None, not self._parts

    with patch("gallery.infrastructure.drive.client.MediaIoBaseDownload", FakeDownload):
        chunks = [chunk async for chunk in _drive().iter_media("i1")]
    assert chunks == [b"ab", b"cd", b"e"]
    service_mock.files.return_value.get_media.assert_called_once_with(fileId="i1")


async def test_iter_media_http_error(service_mock) -> None:
    class FailingDownload:
        def __init__(self, fd, request, chunksize):
            pass

        def next_chunk(self):
            raise _http_error(403)

    with patch("gallery.infrastructure.drive.client.MediaIoBaseDownload", FailingDownload):
        with pytest.raises(DriveRequestError) as exc_info:
            async for _ in _drive().iter_media("i1"):
                pass
    assert exc_info.value.status == 403


async def test_iter_media_closes_service_after_download(service_mock) -> None:
    class OneShotDownload:
        def __init__(self, fd, request, chunksize):
            self._fd = fd

        def next_chunk(self):
            self._fd.write(b"all")
            return None, True

    with patch("gallery.infrastructure.drive.client.MediaIoBaseDownload", OneShotDownload):
        assert [chunk async for chunk in _drive().iter_media("i1")] == [b"all"]
    service_mock.close.assert_called_once_with()


async def test_iter_media_closes_service_when_stream_is_abandoned(service_mock) -> None:
    """Closing the generator early (client went away) releases the transport."""

    class EndlessDownload:
        def __init__(self, fd, request, chunksize):
            self._fd = fd

        def next_chunk(self):
            self._fd.write(b"xx")
            return None, False

    with patch("gallery.infrastructure.drive.client.MediaIoBaseDownload", EndlessDownload):
        media = _drive().iter_media("i1")
        assert await anext(media) == b"xx"
        service_mock.close.assert_not_called()
        await media.aclose()
    service_mock.close.assert_called_once_with()


async def test_iter_media_closes_service_on_error(service_mock) -> None:
    class FailingDownload:
        def __init__(self, fd, request, chunksize):
            pass

        def next_chunk(self):
            raise OSError("reset")

    with patch("gallery.infrastructure.drive.client.MediaIoBaseDownload", FailingDownload):
        with pytest.raises(DriveRequestError):
            async for _ in _drive().iter_media("i1"):
                pass
    service_mock.close.assert_called_once_with()
