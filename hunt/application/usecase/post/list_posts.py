"""List posts use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from hunt.domain.service import PostService
from hunt.domain.value import UserId

from ..views import PostView


class ListPostsRequest(BaseModel):
    """List posts request."""

    author_id: str | None = None  # Only this author's posts when set
    limit: int = Field(default=100, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListPostsUseCase:
    """Use case for listing posts, newest first."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> list[PostView]:
        """Execute list posts flow.

        Args:
            request: Filter and pagination

        Returns:
            Posts, newest first
        """
        if request.author_id is not None:
            posts = await self.post_service.list_posts_by_author(
                UserId(UUID(request.author_id)),
                limit=request.limit,
                offset=request.offset,
            )
        else:
            posts = await self.post_service.list_posts(
                limit=request.limit, offset=request.offset
            )
        return [PostView.from_post(post) for post in posts]
