"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.domain.error import ConcurrentUpdateError, NotFoundError
from hunt.domain.model import Post
from hunt.domain.repository.post import PostRepository
from hunt.domain.value import PostId, UserId
from hunt.persistence.mappers import post_to_dict, row_to_post
from hunt.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(dict(row))

    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Post]:
        """Find posts, newest first."""
        with logfire.span("post_repository.find_all", limit=limit, offset=offset):
            stmt = (
                select(posts_table)
                .order_by(desc(posts_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def find_by_author(
        self, author_id: UserId, limit: int = 100, offset: int = 0
    ) -> List[Post]:
        """Find posts by a specific author, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(desc(posts_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def create(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span(
            "post_repository.create", post_id=str(post.id), title=post.title
        ):
            post_dict = post_to_dict(post)
            post_dict["version"] = 0
            stmt = posts_table.insert().values(**post_dict)
            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Post inserted", post_id=str(post.id))
            return post.model_copy(update={"version": 0})

    async def update(self, post: Post) -> Post:
        """Replace a stored post if it is still at ``post.version``.

        The version check and the write are one UPDATE statement, so two
        requests that read the same version can't both succeed.
        """
        with logfire.span(
            "post_repository.update",
            post_id=str(post.id),
            expected_version=post.version,
        ):
            values = post_to_dict(post)
            values.pop("id")
            values.pop("created_at")
            values["version"] = post.version + 1

            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .where(posts_table.c.version == post.version)
                .values(**values)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if row is None:
                exists = await self.session.execute(
                    select(posts_table.c.id).where(posts_table.c.id == post.id)
                )
                if exists.first() is None:
                    logfire.warn("Post vanished before update", post_id=str(post.id))
                    raise NotFoundError("Post", str(post.id))
                raise ConcurrentUpdateError("Post", str(post.id), post.version)

            await self.session.flush()
            return row_to_post(dict(row))

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        stmt = (
            posts_table.delete()
            .where(posts_table.c.id == post_id)
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted
