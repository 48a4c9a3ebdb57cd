"""Create post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hunt.domain.error import ValidationError
from hunt.domain.service import PostService
from hunt.domain.value import UserId

from ..views import PostView


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    first_name: str  # Author name snapshot from the token
    last_name: str
    title: str
    caption: str
    image_url: str
    body: str


class CreatePostUseCase:
    """Use case for publishing a new image post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If a field is empty or too long
        """
        with logfire.span("create_post.execute", title=request.title):
            try:
                post = await self.post_service.create_post(
                    author_id=UserId(UUID(request.author_id)),
                    first_name=request.first_name,
                    last_name=request.last_name,
                    title=request.title.strip(),
                    caption=request.caption.strip(),
                    image_url=request.image_url.strip(),
                    body=request.body.strip(),
                )
            except PydanticValidationError as e:
                logfire.warn("Post creation validation error", error=str(e))
                raise ValidationError("Please provide all required fields")

            return PostView.from_post(post)
