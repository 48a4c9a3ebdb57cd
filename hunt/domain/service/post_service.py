"""Post domain service."""

from typing import Callable
from uuid import uuid4

import logfire

from hunt.config import PostSettings
from hunt.domain.error import (
    ConcurrentUpdateError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
)
from hunt.domain.model import Post
from hunt.domain.model.common import utcnow
from hunt.domain.repository import PostRepository
from hunt.domain.value import PostId, UserId

from .base import Service

# Fields an author may change after publishing
EDITABLE_FIELDS = frozenset({"title", "caption", "image_url", "body"})


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, post_settings: PostSettings
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            post_settings: Post write settings (retry budget)
        """
        self.post_repository = post_repository
        self.max_update_retries = post_settings.max_update_retries

    async def create_post(
        self,
        author_id: UserId,
        first_name: str,
        last_name: str,
        title: str,
        caption: str,
        image_url: str,
        body: str,
    ) -> Post:
        """Create a post with no comments and no votes.

        Args:
            author_id: Author user ID
            first_name: Author first name snapshot
            last_name: Author last name snapshot
            title: Post title
            caption: Image caption
            image_url: Public URL of the post image
            body: Post text

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), title=title
        ):
            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                first_name=first_name,
                last_name=last_name,
                title=title,
                caption=caption,
                image_url=image_url,
                body=body,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.create(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def require_post(self, post_id: PostId) -> Post:
        """Get a post by ID or fail.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(self, limit: int = 100, offset: int = 0) -> list[Post]:
        """List posts, newest first."""
        with logfire.span("post_service.list_posts", limit=limit, offset=offset):
            posts = await self.post_repository.find_all(limit=limit, offset=offset)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def list_posts_by_author(
        self, author_id: UserId, limit: int = 100, offset: int = 0
    ) -> list[Post]:
        """List one author's posts, newest first."""
        with logfire.span(
            "post_service.list_posts_by_author", author_id=str(author_id)
        ):
            posts = await self.post_repository.find_by_author(
                author_id, limit=limit, offset=offset
            )
            logfire.info(
                "Author posts listed", author_id=str(author_id), count=len(posts)
            )
            return posts

    async def apply_change(
        self, post_id: PostId, change: Callable[[Post], Post]
    ) -> Post:
        """Apply a change to a post as an atomic read-modify-write.

        Loads the post, applies ``change`` and writes the result conditionally
        on the version that was read. If another request wrote in between, the
        post is reloaded and ``change`` is applied again to the fresh state.

        Args:
            post_id: Post ID
            change: Pure function from the current post to the desired post.
                May be called more than once; exceptions it raises propagate.

        Returns:
            The stored post

        Raises:
            NotFoundError: If the post doesn't exist (nothing is written)
            ConflictError: If every attempt lost a write race
        """
        with logfire.span("post_service.apply_change", post_id=str(post_id)):
            for attempt in range(1, self.max_update_retries + 1):
                post = await self.post_repository.find_by_id(post_id)
                if post is None:
                    logfire.warn("Change on non-existent post", post_id=str(post_id))
                    raise NotFoundError("Post", str(post_id))

                try:
                    return await self.post_repository.update(change(post))
                except ConcurrentUpdateError as e:
                    logfire.warn(
                        "Post write lost a race, retrying",
                        post_id=str(post_id),
                        attempt=attempt,
                        expected_version=e.expected_version,
                    )

            logfire.error(
                "Post write retries exhausted",
                post_id=str(post_id),
                attempts=self.max_update_retries,
            )
            raise ConflictError(
                f"Post {post_id} is being modified concurrently, please retry"
            )

    async def edit_post(
        self, post_id: PostId, user_id: UserId, changes: dict[str, str]
    ) -> Post:
        """Edit a post's content fields.

        Args:
            post_id: Post ID
            user_id: Editing user (must be the author)
            changes: New values for any of title, caption, image_url, body

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user isn't the author
            ValueError: If an unknown field is given
        """
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")

        def edit(post: Post) -> Post:
            if post.author_id != user_id:
                raise NotAuthorizedError("post", str(post_id), str(user_id))
            # Round-trip through validation so field constraints still apply
            return Post.model_validate(
                {**post.model_dump(), **changes, "updated_at": utcnow()}
            )

        with logfire.span(
            "post_service.edit_post",
            post_id=str(post_id),
            user_id=str(user_id),
            fields=sorted(changes),
        ):
            updated = await self.apply_change(post_id, edit)
            logfire.info("Post edited", post_id=str(post_id))
            return updated

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post.

        Args:
            post_id: Post ID
            user_id: Deleting user (must be the author)

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user isn't the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.require_post(post_id)
            if post.author_id != user_id:
                logfire.warn(
                    "Unauthorized post delete attempt",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(user_id))

            if not await self.post_repository.delete(post_id):
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))
