"""Image upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, UploadFile, status

from hunt.application.usecase.image import (
    UploadImageRequest,
    UploadImageResponse,
    UploadImageUseCase,
)
from hunt.config import StorageSettings
from hunt.interface.api.auth import get_current_user
from hunt.interface.api.schemas import ApiResponse

router = APIRouter(prefix="/images", tags=["images"], route_class=DishkaRoute)


@router.post(
    "",
    response_model=ApiResponse[UploadImageResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
async def upload_image(
    upload_image_use_case: FromDishka[UploadImageUseCase],
    storage_settings: FromDishka[StorageSettings],
    file: UploadFile = File(...),
) -> ApiResponse[UploadImageResponse]:
    """Upload a post image and return its public URL.

    Requires authentication.
    """
    # One byte past the limit is enough to reject oversized files
    data = await file.read(storage_settings.max_upload_bytes + 1)
    result = await upload_image_use_case.execute(
        UploadImageRequest(
            file_name=file.filename or "image",
            content_type=file.content_type or "application/octet-stream",
            data=data,
        )
    )
    return ApiResponse(data=result)
