"""Unit tests for ImageService."""

import pytest

from hunt.adapter.supabase import MockSupabaseImageStorage
from hunt.config import StorageSettings
from hunt.domain.error import ValidationError
from hunt.domain.service import ImageService
from hunt.domain.service.image_service import storage_file_name
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


class TestStorageFileName:
    """Tests for storage_file_name."""

    def test_prefixes_timestamp(self):
        assert storage_file_name("cat.png", now_ms=1700000000000) == (
            "1700000000000-cat.png"
        )

    def test_unsafe_characters_are_replaced(self):
        assert storage_file_name("my cat (1).png", now_ms=1) == "1-my_cat_1_.png"

    def test_directories_are_dropped(self):
        assert storage_file_name("../../etc/passwd", now_ms=1) == "1-passwd"

    def test_empty_name_falls_back(self):
        assert storage_file_name("", now_ms=1) == "1-image"


class TestUploadImage:
    """Tests for ImageService.upload_image."""

    @pytest.mark.asyncio
    async def test_upload_returns_public_url(self, unit_env):
        """A valid image is stored and its URL returned."""
        # Arrange
        image_service = await unit_env.get(ImageService)
        storage = await unit_env.get(MockSupabaseImageStorage)

        # Act
        url = await image_service.upload_image("cat.png", PNG, "image/png")

        # Assert
        assert len(storage.objects) == 1
        path, (data, content_type) = next(iter(storage.objects.items()))
        assert path.endswith("-cat.png")
        assert data == PNG
        assert content_type == "image/png"
        assert url == f"{storage.base_url}/{path}"

    @pytest.mark.asyncio
    async def test_non_image_is_rejected(self, unit_env):
        """Only configured image types are accepted."""
        image_service = await unit_env.get(ImageService)
        storage = await unit_env.get(MockSupabaseImageStorage)

        with pytest.raises(ValidationError, match="Unsupported image type"):
            await image_service.upload_image("notes.txt", b"hello", "text/plain")

        assert storage.objects == {}

    @pytest.mark.asyncio
    async def test_empty_file_is_rejected(self, unit_env):
        image_service = await unit_env.get(ImageService)

        with pytest.raises(ValidationError, match="empty"):
            await image_service.upload_image("cat.png", b"", "image/png")

    @pytest.mark.asyncio
    async def test_oversized_file_is_rejected(self):
        """Files over the size limit never reach storage."""
        # Arrange
        storage = MockSupabaseImageStorage()
        image_service = ImageService(
            storage=storage, storage_settings=StorageSettings(max_upload_bytes=10)
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="maximum size"):
            await image_service.upload_image("cat.png", PNG, "image/png")

        assert storage.objects == {}
