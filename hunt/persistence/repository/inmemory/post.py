"""In-memory post repository for testing."""

from typing import Optional

from hunt.domain.error import ConcurrentUpdateError, NotFoundError
from hunt.domain.model.post import Post
from hunt.domain.repository.post import PostRepository
from hunt.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    The version check and the write in ``update`` happen without an await
    in between, so they are atomic on the event loop.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Post]:
        """Find posts, newest first."""
        posts = sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def find_by_author(
        self, author_id: UserId, limit: int = 100, offset: int = 0
    ) -> list[Post]:
        """Find posts by a specific author, newest first."""
        posts = [p for p in self._posts.values() if p.author_id == author_id]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def create(self, post: Post) -> Post:
        """Insert a new post."""
        stored = post.model_copy(update={"version": 0})
        self._posts[post.id] = stored
        return stored

    async def update(self, post: Post) -> Post:
        """Replace a stored post if it is still at ``post.version``."""
        current = self._posts.get(post.id)
        if current is None:
            raise NotFoundError("Post", str(post.id))
        if current.version != post.version:
            raise ConcurrentUpdateError("Post", str(post.id), post.version)

        stored = post.model_copy(update={"version": post.version + 1})
        self._posts[post.id] = stored
        return stored

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None
