"""Upload image use case."""

from pydantic import BaseModel

from hunt.domain.service import ImageService


class UploadImageRequest(BaseModel):
    """Upload image request."""

    file_name: str
    content_type: str
    data: bytes


class UploadImageResponse(BaseModel):
    """Upload image response."""

    url: str


class UploadImageUseCase:
    """Use case for storing a post image before the post is created."""

    def __init__(self, image_service: ImageService) -> None:
        """Initialize upload image use case.

        Args:
            image_service: Image domain service
        """
        self.image_service = image_service

    async def execute(self, request: UploadImageRequest) -> UploadImageResponse:
        """Execute upload image flow.

        Raises:
            ValidationError: If the file is not an accepted image
            StorageError: If the storage backend fails
        """
        url = await self.image_service.upload_image(
            request.file_name, request.data, request.content_type
        )
        return UploadImageResponse(url=url)
