"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Google credentials are optional at load time so the
app can start (and answer GET /) before Drive access is configured;
they are resolved on the first Drive call.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gallery.core.constants import FOLDER_PATH_SEP


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "student-gallery"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Frontend / CORS
    frontend_url: str = ""
    # Comma-separated; falls back to frontend_url when empty.
    allowed_origins: str = ""
    # Base URL the bundled form page calls; empty means same origin.
    api_base_url: str = ""

    # Google service account: full JSON key (inline), email + private key, or key file.
    google_service_account_key: SecretStr | None = None
    google_cloud_client_email: str | None = None
    google_cloud_private_key: SecretStr | None = None
    google_credentials_file: str = "./credentials.json"

    # Gallery behaviour
    drive_root_folder: str = "Images"
    require_roll_number: bool = True
    max_images: int = 10_000
    lookup_timeout_seconds: float = 30.0
    image_cache_max_age: int = 86_400  # 24 hours

    # Request / middleware
    rate_limit: str = "100 per 15 minutes"
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Reject non-positive caps and timeouts and a nested root folder name."""
        if self.max_images <= 0:
            raise ValueError(f"MAX_IMAGES must be positive, got: {self.max_images}")
        if self.lookup_timeout_seconds <= 0:
            raise ValueError(
                "LOOKUP_TIMEOUT_SECONDS must be positive, "
                f"got: {self.lookup_timeout_seconds}"
            )
        if not self.drive_root_folder.strip():
            raise ValueError("DRIVE_ROOT_FOLDER must not be empty")
        if FOLDER_PATH_SEP in self.drive_root_folder:
            raise ValueError(
                "DRIVE_ROOT_FOLDER must be a single folder name, "
                f"got: {self.drive_root_folder!r}"
            )
        return self

    @property
    def cors_origins(self) -> list[str]:
        """Origins allowed by CORS (ALLOWED_ORIGINS, else FRONTEND_URL)."""
        raw = self.allowed_origins or self.frontend_url
        return [o.strip() for o in raw.split(",") if o.strip()]

    @property
    def proxy_allow_origin(self) -> str:
        """Access-Control-Allow-Origin value for proxied image bytes."""
        return self.frontend_url.strip() or "*"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so
    the next get_settings() uses the new values.
    """
    return Settings()
