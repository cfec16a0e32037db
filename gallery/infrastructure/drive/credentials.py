"""Service-account credentials for the Drive API.

Resolution order: GOOGLE_SERVICE_ACCOUNT_KEY (full JSON string, e.g. on
serverless hosts), then GOOGLE_CLOUD_CLIENT_EMAIL + GOOGLE_CLOUD_PRIVATE_KEY,
then the GOOGLE_CREDENTIALS_FILE key file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from google.oauth2 import service_account

from gallery.core.constants import DRIVE_READONLY_SCOPE, DRIVE_TOKEN_URI
from gallery.infrastructure.exceptions import DriveConfigurationError

if TYPE_CHECKING:
    from gallery.core.config import Settings

logger = logging.getLogger(__name__)

SCOPES = [DRIVE_READONLY_SCOPE]


def normalize_private_key(raw: str) -> str:
    """Turn literal ``\\n`` sequences (common in env vars) into newlines."""
    return raw.replace("\\n", "\n")


def _from_info(info: dict[str, Any], source: str) -> service_account.Credentials:
    try:
        return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
    except (ValueError, KeyError) as e:
        raise DriveConfigurationError(f"invalid service account in {source}") from e


def load_credentials(settings: "Settings") -> service_account.Credentials:
    """Return read-only Drive credentials from settings.

    Raises:
        DriveConfigurationError: No usable credentials were found.
    """
    key_json = (
        settings.google_service_account_key.get_secret_value()
        if settings.google_service_account_key
        else None
    )
    if key_json:
        try:
            info = json.loads(key_json)
        except json.JSONDecodeError as e:
            raise DriveConfigurationError(
                "GOOGLE_SERVICE_ACCOUNT_KEY is not valid JSON"
            ) from e
        logger.info("Using service account from GOOGLE_SERVICE_ACCOUNT_KEY")
        return _from_info(info, "GOOGLE_SERVICE_ACCOUNT_KEY")

    private_key = (
        settings.google_cloud_private_key.get_secret_value()
        if settings.google_cloud_private_key
        else None
    )
    if private_key:
        if not settings.google_cloud_client_email:
            raise DriveConfigurationError(
                "GOOGLE_CLOUD_CLIENT_EMAIL is required with GOOGLE_CLOUD_PRIVATE_KEY"
            )
        logger.info(
            "Using service account %s from environment",
            settings.google_cloud_client_email,
        )
        return _from_info(
            {
                "type": "service_account",
                "client_email": settings.google_cloud_client_email,
                "private_key": normalize_private_key(private_key),
                "token_uri": DRIVE_TOKEN_URI,
            },
            "GOOGLE_CLOUD_PRIVATE_KEY",
        )

    path = Path(settings.google_credentials_file).expanduser()
    if not path.is_file():
        raise DriveConfigurationError(f"credentials file not found: {path}")
    logger.info("Using service account key file %s", path)
    try:
        return service_account.Credentials.from_service_account_file(
            str(path), scopes=SCOPES
        )
    except (ValueError, KeyError) as e:
        raise DriveConfigurationError(f"invalid service account in {path}") from e
