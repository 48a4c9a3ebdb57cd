"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from hunt.domain.service import PostService
from hunt.domain.value import PostId

from ..views import PostView


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Execute get post flow.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_service.require_post(PostId(UUID(request.post_id)))
        return PostView.from_post(post)
