"""Unit tests for PostService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from hunt.domain.error import NotAuthorizedError, NotFoundError
from hunt.domain.repository import PostRepository
from hunt.domain.service import PostService
from hunt.domain.value import PostId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for PostService.create_post."""

    @pytest.mark.asyncio
    async def test_new_post_has_no_comments_or_votes(self, unit_env):
        """A created post starts empty and at version 0."""
        # Arrange
        post_service = await unit_env.get(PostService)
        author = UserId(uuid4())

        # Act
        post = await post_service.create_post(
            author_id=author,
            first_name="Ada",
            last_name="Lovelace",
            title="Analytical Engine",
            caption="Gears",
            image_url="https://storage.test/engine.png",
            body="Notes on the engine",
        )

        # Assert
        assert post.author_id == author
        assert post.comments == []
        assert post.votes == {}
        assert post.vote_count == 0
        assert post.version == 0
        assert post.created_at == post.updated_at
        assert await post_service.get_post_by_id(post.id) == post


class TestListPosts:
    """Tests for listing posts."""

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        """Posts come back most recent first."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        now = datetime.now(timezone.utc)
        old = await post_repo.create(
            make_post(title="old", created_at=now - timedelta(hours=2))
        )
        new = await post_repo.create(make_post(title="new", created_at=now))
        mid = await post_repo.create(
            make_post(title="mid", created_at=now - timedelta(hours=1))
        )

        # Act
        posts = await post_service.list_posts()

        # Assert
        assert [p.id for p in posts] == [new.id, mid.id, old.id]

    @pytest.mark.asyncio
    async def test_paging(self, unit_env):
        """limit and offset slice the ordered list."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        now = datetime.now(timezone.utc)
        for i in range(5):
            await post_repo.create(
                make_post(title=f"post {i}", created_at=now - timedelta(minutes=i))
            )

        # Act
        page = await post_service.list_posts(limit=2, offset=1)

        # Assert
        assert [p.title for p in page] == ["post 1", "post 2"]

    @pytest.mark.asyncio
    async def test_by_author(self, unit_env):
        """Only the given author's posts are listed."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = UserId(uuid4())
        mine = await post_repo.create(make_post(author_id=author))
        await post_repo.create(make_post())

        # Act
        posts = await post_service.list_posts_by_author(author)

        # Assert
        assert [p.id for p in posts] == [mine.id]


class TestEditPost:
    """Tests for PostService.edit_post."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """The author's changes are stored and updated_at moves on."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = UserId(uuid4())
        earlier = datetime.now(timezone.utc) - timedelta(days=1)
        post = await post_repo.create(make_post(author_id=author, created_at=earlier))

        # Act
        updated = await post_service.edit_post(
            post.id, author, {"title": "Better title", "body": "New body"}
        )

        # Assert
        assert updated.title == "Better title"
        assert updated.body == "New body"
        assert updated.caption == post.caption
        assert updated.updated_at > earlier
        assert updated.created_at == earlier

    @pytest.mark.asyncio
    async def test_non_author_is_rejected(self, unit_env):
        """Someone else's edit fails and changes nothing."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(make_post())

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.edit_post(
                post.id, UserId(uuid4()), {"title": "Mine now"}
            )

        stored = await post_repo.find_by_id(post.id)
        assert stored.title == post.title

    @pytest.mark.asyncio
    async def test_unknown_field_is_rejected(self, unit_env):
        """Only content fields may be edited."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValueError, match="vote_count"):
            await post_service.edit_post(
                PostId(uuid4()), UserId(uuid4()), {"vote_count": 100}
            )

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        """Editing an unknown post fails with not found."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.edit_post(
                PostId(uuid4()), UserId(uuid4()), {"title": "x"}
            )


class TestDeletePost:
    """Tests for PostService.delete_post."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        """The author's delete removes the post."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = UserId(uuid4())
        post = await post_repo.create(make_post(author_id=author))

        # Act
        await post_service.delete_post(post.id, author)

        # Assert
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_non_author_is_rejected(self, unit_env):
        """Someone else's delete fails and the post stays."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(make_post())

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(post.id, UserId(uuid4()))

        assert await post_repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        """Deleting an unknown post fails with not found."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(PostId(uuid4()), UserId(uuid4()))
