"""Core constants: Drive literals, cache key format and API limits.

Single source of truth for values shared by infrastructure and services.
"""

# Google Drive
DRIVE_READONLY_SCOPE = "https://www.googleapis.com/auth/drive.readonly"
DRIVE_TOKEN_URI = "https://oauth2.googleapis.com/token"
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
IMAGE_MIME_PREFIX = "image/"

# Largest page the files.list endpoint accepts
DRIVE_PAGE_SIZE = 1000
DRIVE_DOWNLOAD_CHUNK_SIZE = 1024 * 1024  # 1MB

# Folder cache keys are path-like ("Images/UG")
FOLDER_PATH_SEP = "/"

# Public URL prefix of the image proxy route
IMAGE_PROXY_PREFIX = "/api/image"

ROLL_NUMBER_LENGTH = 10
