"""GET /api/images: parameter validation, folder lookup and listing."""

import pytest
from httpx import AsyncClient

from gallery.infrastructure.exceptions import DriveRequestError
from tests.fakes import ROLL_NUMBER, FakeDrive


@pytest.mark.parametrize(
    "params",
    [
        {},
        {"rollNumber": ROLL_NUMBER},
        {"level": "", "rollNumber": ROLL_NUMBER},
    ],
)
async def test_missing_level_returns_400(client: AsyncClient, drive: FakeDrive, params: dict) -> None:
    """No level → 400 "Level is required", without touching Drive."""
    response = await client.get("/api/images", params=params)
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Level is required"}
    assert drive.calls == []


@pytest.mark.parametrize("level", ["ug", "MSC", "UG ", "PhD"])
@pytest.mark.parametrize("roll_number", [ROLL_NUMBER, "abc", None])
async def test_invalid_level_returns_400_whatever_the_roll_number(
    client: AsyncClient,
    drive: FakeDrive,
    level: str,
    roll_number: str | None,
) -> None:
    """Level is checked first: an unknown level is a 400 even with a bad roll number."""
    params = {"level": level}
    if roll_number is not None:
        params["rollNumber"] = roll_number
    response = await client.get("/api/images", params=params)
    assert response.status_code == 400
    assert response.json()["message"] == "Level must be one of: UG, PG, PHD"
    assert drive.calls == []


async def test_missing_roll_number_returns_400(client: AsyncClient, drive: FakeDrive) -> None:
    """Roll number is required by default."""
    response = await client.get("/api/images", params={"level": "UG"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Roll number is required"}
    assert drive.calls == []


@pytest.mark.parametrize(
    "roll_number",
    [
        "123456789",
        "12345678901",
        "12345abcde",
        "12345 67890",
        "-123456789",
        "１２３４５６７８９０",
        "1234567890\n",
    ],
)
async def test_malformed_roll_number_returns_400(
    client: AsyncClient, drive: FakeDrive, roll_number: str
) -> None:
    """Anything but exactly ten ASCII digits is rejected before any Drive call."""
    response = await client.get(
        "/api/images", params={"level": "UG", "rollNumber": roll_number}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Roll number must be exactly 10 digits"
    assert drive.calls == []


async def test_returns_student_images(client: AsyncClient) -> None:
    """Images in Images/UG/<roll> come back as proxy refs; non-images are skipped."""
    response = await client.get(
        "/api/images", params={"level": "UG", "rollNumber": ROLL_NUMBER}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["level"] == "UG"
    assert data["rollNumber"] == ROLL_NUMBER
    assert data["images"] == [
        {"id": f"img{i}", "url": f"/api/image/img{i}", "type": "image/jpeg"}
        for i in range(3)
    ]


async def test_unknown_student_returns_empty_list(client: AsyncClient) -> None:
    """A missing student folder is not an error."""
    response = await client.get(
        "/api/images", params={"level": "UG", "rollNumber": "9999999999"}
    )
    assert response.status_code == 200
    assert response.json()["images"] == []


async def test_missing_level_folder_returns_empty_list(client: AsyncClient) -> None:
    """PHD has no folder under Images."""
    response = await client.get(
        "/api/images", params={"level": "PHD", "rollNumber": ROLL_NUMBER}
    )
    assert response.status_code == 200
    assert response.json()["images"] == []


async def test_missing_root_folder_returns_empty_list(
    client: AsyncClient, drive: FakeDrive
) -> None:
    drive.files.clear()
    drive.parents.clear()
    response = await client.get(
        "/api/images", params={"level": "UG", "rollNumber": ROLL_NUMBER}
    )
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "level": "UG",
        "rollNumber": ROLL_NUMBER,
        "images": [],
    }


async def test_root_and_level_folders_are_cached(
    client: AsyncClient, drive: FakeDrive
) -> None:
    """Repeat lookups reuse the cached root and level ids; the student folder is looked up each time."""
    params = {"level": "UG", "rollNumber": ROLL_NUMBER}
    first = await client.get("/api/images", params=params)
    second = await client.get("/api/images", params=params)
    assert first.json() == second.json()
    assert drive.count("find_folders", "Images") == 1
    assert drive.count("find_folders", "UG") == 1
    assert drive.count("find_folders", ROLL_NUMBER) == 2


async def test_student_folder_created_later_is_found(
    client: AsyncClient, drive: FakeDrive
) -> None:
    """A student folder added after a miss is picked up on the next request."""
    params = {"level": "PG", "rollNumber": "5555555555"}
    before = await client.get("/api/images", params=params)
    assert before.json()["images"] == []
    folder = drive.add_folder("5555555555", "folder-pg")
    drive.add_file(folder, "late.png", mime_type="image/png", file_id="late0")
    after = await client.get("/api/images", params=params)
    assert [image["id"] for image in after.json()["images"]] == ["late0"]


async def test_level_only_lookup_when_roll_number_optional(
    client: AsyncClient, override_settings
) -> None:
    """With REQUIRE_ROLL_NUMBER off, the level folder's own images are listed."""
    override_settings(require_roll_number=False)
    response = await client.get("/api/images", params={"level": "UG"})
    assert response.status_code == 200
    data = response.json()
    assert "rollNumber" not in data
    assert data["images"] == [
        {"id": "group0", "url": "/api/image/group0", "type": "image/png"}
    ]


async def test_supplied_roll_number_still_validated_when_optional(
    client: AsyncClient, override_settings
) -> None:
    override_settings(require_roll_number=False)
    response = await client.get("/api/images", params={"level": "UG", "rollNumber": "12"})
    assert response.status_code == 400


async def test_listing_is_capped(client: AsyncClient, drive: FakeDrive, override_settings) -> None:
    """No more than MAX_IMAGES refs are returned; pages are followed up to the cap."""
    for index in range(3, 7):
        drive.add_file("folder-student", f"photo{index}.jpg", file_id=f"img{index}")
    override_settings(max_images=5)
    response = await client.get(
        "/api/images", params={"level": "UG", "rollNumber": ROLL_NUMBER}
    )
    assert response.status_code == 200
    assert [image["id"] for image in response.json()["images"]] == [
        f"img{i}" for i in range(5)
    ]
    assert drive.count("list_image_page", "folder-student") == 1


async def test_lookup_timeout_returns_500(
    client: AsyncClient, drive: FakeDrive, override_settings
) -> None:
    """A lookup slower than the timeout is a generic 500."""
    override_settings(lookup_timeout_seconds=0.05)
    drive.delay = 1.0
    response = await client.get(
        "/api/images", params={"level": "UG", "rollNumber": ROLL_NUMBER}
    )
    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Error retrieving images"}


async def test_drive_failure_returns_500(client: AsyncClient, drive: FakeDrive) -> None:
    """Drive errors surface as the same generic 500, without upstream detail."""
    drive.error = DriveRequestError("files.list", "backend error 503", status=503)
    response = await client.get(
        "/api/images", params={"level": "UG", "rollNumber": ROLL_NUMBER}
    )
    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Error retrieving images"}
    assert "503" not in response.text
