"""Object storage infrastructure providers."""

from dishka import Scope, provide

from hunt.adapter.supabase import RealSupabaseImageStorage
from hunt.config import StorageSettings
from hunt.domain.service import ImageStorage
from hunt.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Image storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider backed by Supabase Storage."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_storage(self, storage_settings: StorageSettings) -> ImageStorage:
        """Provide Supabase image storage.

        Raises:
            ValueError: If the storage API key is not configured
        """
        if not storage_settings.api_key:
            raise ValueError("Supabase storage API key must be configured")

        return RealSupabaseImageStorage(storage_settings)
