"""Update post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hunt.domain.error import ValidationError
from hunt.domain.service import PostService
from hunt.domain.value import PostId, UserId

from ..views import PostView


class UpdatePostRequest(BaseModel):
    """Update post request. Unset fields are left unchanged."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    title: str | None = None
    caption: str | None = None
    image_url: str | None = None
    body: str | None = None


class UpdatePostUseCase:
    """Use case for the author editing their post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            The updated post

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user isn't the author
            ValidationError: If a new value is empty or too long
        """
        changes = request.model_dump(
            include={"title", "caption", "image_url", "body"}, exclude_none=True
        )
        changes = {field: value.strip() for field, value in changes.items()}

        try:
            post = await self.post_service.edit_post(
                PostId(UUID(request.post_id)), UserId(UUID(request.user_id)), changes
            )
        except PydanticValidationError as e:
            logfire.warn("Post update validation error", error=str(e))
            raise ValidationError("Post fields cannot be empty or too long")

        return PostView.from_post(post)
