"""Add comment use case."""

from uuid import UUID

from pydantic import BaseModel

from hunt.domain.service import CommentService
from hunt.domain.value import PostId, UserId

from ..views import CommentView


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str  # UUID string
    text: str
    author_id: str  # User ID from authenticated user
    first_name: str  # Author name snapshot from the token
    last_name: str


class AddCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> list[CommentView]:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            The post's comments, most recent first

        Raises:
            ValidationError: If the comment is empty
            NotFoundError: If post not found
        """
        post = await self.comment_service.add_comment(
            post_id=PostId(UUID(request.post_id)),
            author_id=UserId(UUID(request.author_id)),
            first_name=request.first_name,
            last_name=request.last_name,
            text=request.text,
        )
        return [CommentView.from_comment(c) for c in post.comments]
