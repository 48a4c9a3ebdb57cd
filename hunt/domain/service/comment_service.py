"""Comment domain service."""

from uuid import uuid4

import logfire

from hunt.domain.error import ValidationError
from hunt.domain.model import Comment, Post
from hunt.domain.model.common import utcnow
from hunt.domain.value import CommentId, PostId, UserId

from .base import Service
from .post_service import PostService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize comment service.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def add_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        first_name: str,
        last_name: str,
        text: str,
    ) -> Post:
        """Prepend a comment to a post.

        Args:
            post_id: Post ID
            author_id: Comment author user ID
            first_name: Author first name snapshot
            last_name: Author last name snapshot
            text: Comment text (surrounding whitespace is dropped)

        Returns:
            The updated post

        Raises:
            ValidationError: If the text is empty after trimming
            NotFoundError: If post not found
        """
        with logfire.span(
            "comment_service.add_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            text = text.strip()
            if not text:
                logfire.warn("Empty comment rejected", post_id=str(post_id))
                raise ValidationError("Comment cannot be empty")

            comment = Comment(
                id=CommentId(uuid4()),
                user_id=author_id,
                first_name=first_name,
                last_name=last_name,
                text=text,
                created_at=utcnow(),
            )

            saved = await self.post_service.apply_change(
                post_id, lambda post: post.add_comment(comment)
            )
            logfire.info(
                "Comment added",
                post_id=str(post_id),
                comment_id=str(comment.id),
                comment_count=len(saved.comments),
            )
            return saved
