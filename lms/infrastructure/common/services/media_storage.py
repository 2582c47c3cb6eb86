"""Local-disk media storage for avatars, course thumbnails and banners."""

import base64
import binascii
import logging
import re
import uuid
from dataclasses import dataclass
from pathlib import Path

from lms.config import Settings, get_settings
from lms.exceptions import InvalidMediaError

logger = logging.getLogger(__name__)

DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>[\w/+.-]+);base64,(?P<data>.*)$", re.DOTALL)

EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/svg+xml": ".svg",
}


@dataclass(frozen=True)
class StoredAsset:
    """Result of an upload: the id to destroy it by and the URL to serve it from."""

    public_id: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"public_id": self.public_id, "url": self.url}


class LocalMediaStorage:
    """
    Stores uploaded images under MEDIA_ROOT and serves them from MEDIA_URL.

    Uploads arrive as base64 data URLs (or bare base64). The public id is the
    path relative to the media root, e.g. `avatars/3f2a...png`.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.root = Path(settings.MEDIA_ROOT)
        self.base_url = settings.MEDIA_URL

    def upload(self, data: str, folder: str) -> StoredAsset:
        """
        Decode and save an image.

        Args:
            data: Base64 data URL or bare base64 string
            folder: Sub-directory grouping the asset (avatars, courses, layout)

        Returns:
            Stored asset reference

        Raises:
            InvalidMediaError: If the payload is not valid base64 image data
        """
        match = DATA_URL_PATTERN.match(data.strip())
        if match:
            mime = match.group("mime").lower()
            encoded = match.group("data")
            if mime not in EXTENSIONS:
                raise InvalidMediaError(f"unsupported media type {mime}")
            extension = EXTENSIONS[mime]
        else:
            encoded = data.strip()
            extension = ".png"

        try:
            content = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError):
            raise InvalidMediaError("payload is not base64") from None
        if not content:
            raise InvalidMediaError("payload is empty")

        public_id = f"{folder}/{uuid.uuid4().hex}{extension}"
        file_path = self._resolve(public_id)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(content)
        logger.info(f"Saved media file: {file_path}")

        return StoredAsset(public_id=public_id, url=f"{self.base_url}/{public_id}")

    def destroy(self, public_id: str) -> bool:
        """
        Delete a stored asset.

        Returns:
            True if the file was deleted, False if it did not exist
        """
        try:
            file_path = self._resolve(public_id)
        except InvalidMediaError:
            logger.warning(f"Refusing to delete media outside the media root: {public_id}")
            return False

        if not file_path.is_file():
            logger.info(f"No media file found for {public_id}")
            return False

        file_path.unlink()
        logger.info(f"Deleted media file: {file_path}")
        return True

    def _resolve(self, public_id: str) -> Path:
        root = self.root.resolve()
        file_path = (root / public_id).resolve()
        if root not in file_path.parents:
            raise InvalidMediaError("asset path escapes the media root")
        return file_path
