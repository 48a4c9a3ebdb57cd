"""Image upload domain service."""

import re
import time
from pathlib import PurePath

import logfire

from hunt.config import StorageSettings
from hunt.domain.error import ValidationError

from .base import Service

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class ImageStorage:
    """Object storage interface for uploaded images."""

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """Store an object.

        Args:
            path: Object path inside the bucket
            data: File content
            content_type: MIME type of the content

        Returns:
            Public URL of the stored object
        """
        raise NotImplementedError


def storage_file_name(original_name: str, now_ms: int | None = None) -> str:
    """Build a collision-resistant object name for an upload.

    The name is the upload time in epoch milliseconds followed by the
    original file name with anything outside ``[A-Za-z0-9._-]`` replaced.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    name = PurePath(original_name or "").name
    name = _UNSAFE_CHARS.sub("_", name).strip("._") or "image"
    return f"{now_ms}-{name}"


class ImageService(Service):
    """Domain service for storing post images."""

    def __init__(self, storage: ImageStorage, storage_settings: StorageSettings):
        """Initialize image service.

        Args:
            storage: Object storage implementation
            storage_settings: Upload limits
        """
        self.storage = storage
        self.storage_settings = storage_settings

    async def upload_image(
        self, file_name: str, data: bytes, content_type: str
    ) -> str:
        """Validate and store an image.

        Args:
            file_name: Name of the file as uploaded
            data: File content
            content_type: Declared MIME type

        Returns:
            Public URL of the stored image

        Raises:
            ValidationError: If the file is empty, too large or not an image
            StorageError: If the storage backend rejects the upload
        """
        with logfire.span(
            "image_service.upload_image",
            file_name=file_name,
            content_type=content_type,
            size=len(data),
        ):
            if content_type not in self.storage_settings.allowed_content_types:
                logfire.warn("Rejected image type", content_type=content_type)
                raise ValidationError(f"Unsupported image type: {content_type}")
            if not data:
                raise ValidationError("Uploaded file is empty")
            if len(data) > self.storage_settings.max_upload_bytes:
                logfire.warn("Rejected oversized image", size=len(data))
                raise ValidationError(
                    "Image exceeds maximum size of "
                    f"{self.storage_settings.max_upload_bytes} bytes"
                )

            path = storage_file_name(file_name)
            url = await self.storage.upload(path, data, content_type)
            logfire.info("Image uploaded", path=path, url=url)
            return url
