"""Supabase Storage client.

Uploads images to a storage bucket over the Storage REST API and hands back
the object's public URL.
"""

from urllib.parse import quote

import httpx
import logfire

from hunt.adapter.error import StorageError
from hunt.config import StorageSettings
from hunt.domain.service.image_service import ImageStorage


class SupabaseImageStorage(ImageStorage):
    """Base class for Supabase image storage.

    Provides type distinction for dependency injection.
    """

    def public_url(self, path: str) -> str:
        """Public URL of an object in the bucket."""
        raise NotImplementedError


class RealSupabaseImageStorage(SupabaseImageStorage):
    """Supabase Storage client backed by httpx.

    Credentials are sent as headers on each request rather than kept on a
    shared, long-lived client.
    """

    def __init__(
        self,
        settings: StorageSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Supabase storage client.

        Args:
            settings: Storage settings (project URL, API key, bucket)
            transport: Optional httpx transport, used to stub the API in tests
        """
        self.base_url = settings.supabase_url.rstrip("/")
        self.api_key = settings.api_key
        self.bucket = settings.bucket
        self.timeout = settings.timeout
        self.transport = transport

    def _headers(self, content_type: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "apikey": self.api_key,
            "Content-Type": content_type,
            "x-upsert": "false",
        }

    def _object_path(self, path: str) -> str:
        return f"{quote(self.bucket)}/{quote(path)}"

    def public_url(self, path: str) -> str:
        """Public URL of an object in the bucket."""
        return f"{self.base_url}/storage/v1/object/public/{self._object_path(path)}"

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """Upload an object to the bucket.

        Args:
            path: Object path inside the bucket
            data: File content
            content_type: MIME type of the content

        Returns:
            Public URL of the uploaded object

        Raises:
            StorageError: If the upload fails
        """
        url = f"{self.base_url}/storage/v1/object/{self._object_path(path)}"

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    url,
                    content=data,
                    headers=self._headers(content_type),
                    timeout=self.timeout,
                )

                if response.status_code not in (200, 201):
                    logfire.error(
                        "Supabase upload failed",
                        status_code=response.status_code,
                        error=response.text,
                        path=path,
                    )
                    raise StorageError(f"Upload failed: {response.status_code}")

        except httpx.HTTPError as e:
            logfire.error("Supabase upload HTTP error", error=str(e), path=path)
            raise StorageError(f"HTTP error during upload: {e}")

        logfire.info("Supabase object uploaded", bucket=self.bucket, path=path)
        return self.public_url(path)


class MockSupabaseImageStorage(SupabaseImageStorage):
    """In-memory image storage for testing.

    Keeps uploaded objects in a dict instead of calling Supabase.
    """

    def __init__(self, base_url: str = "https://storage.test") -> None:
        """Initialize mock storage.

        Args:
            base_url: Prefix for the returned public URLs
        """
        self.base_url = base_url.rstrip("/")
        self.objects: dict[str, tuple[bytes, str]] = {}

    def public_url(self, path: str) -> str:
        """Public URL of a stored object."""
        return f"{self.base_url}/{path}"

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """Keep the object in memory and return its fake public URL."""
        self.objects[path] = (data, content_type)
        return self.public_url(path)
