"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from hunt.domain.model.post import Post
from hunt.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Posts are stored as single documents (comments and votes embedded).
    Writes to an existing post are conditional on the version that was read,
    which makes every read-modify-write cycle atomic per document.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Post]:
        """Find posts, newest first.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 100, offset: int = 0
    ) -> List[Post]:
        """Find posts by a specific author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The stored post (version 0)
        """
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """Replace a stored post if it is still at ``post.version``.

        Args:
            post: The modified post, carrying the version it was read at

        Returns:
            The stored post with its version bumped by one

        Raises:
            NotFoundError: If the post no longer exists
            ConcurrentUpdateError: If the stored version moved on
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if none existed
        """
        pass
