"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from hunt.domain.error import NotFoundError, ValidationError
from hunt.domain.repository import PostRepository
from hunt.domain.service import CommentService, VoteService
from hunt.domain.value import PostId, UserId, VoteType
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddComment:
    """Tests for CommentService.add_comment."""

    @pytest.mark.asyncio
    async def test_comment_is_prepended(self, unit_env):
        """The newest comment should come first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(make_post())
        author = UserId(uuid4())

        # Act
        await comment_service.add_comment(post.id, author, "Ada", "Lovelace", "one")
        updated = await comment_service.add_comment(
            post.id, author, "Ada", "Lovelace", "two"
        )

        # Assert
        assert [c.text for c in updated.comments] == ["two", "one"]
        assert updated.comments[0].user_id == author
        assert updated.comments[0].first_name == "Ada"

        stored = await post_repo.find_by_id(post.id)
        assert stored.comments == updated.comments

    @pytest.mark.asyncio
    async def test_text_is_trimmed(self, unit_env):
        """Surrounding whitespace is dropped."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(make_post())

        # Act
        updated = await comment_service.add_comment(
            post.id, UserId(uuid4()), "Ada", "Lovelace", "  nice shot  "
        )

        # Assert
        assert updated.comments[0].text == "nice shot"

    @pytest.mark.asyncio
    async def test_blank_comment_is_rejected(self, unit_env):
        """Whitespace-only text is a validation error."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(make_post())

        # Act & Assert
        with pytest.raises(ValidationError, match="cannot be empty"):
            await comment_service.add_comment(
                post.id, UserId(uuid4()), "Ada", "Lovelace", "   "
            )

        stored = await post_repo.find_by_id(post.id)
        assert stored.comments == []
        assert stored.version == 0

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        """Commenting on an unknown post fails."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.add_comment(
                PostId(uuid4()), UserId(uuid4()), "Ada", "Lovelace", "hello"
            )

    @pytest.mark.asyncio
    async def test_comment_keeps_votes(self, unit_env):
        """Adding a comment leaves the vote ledger as it was."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.create(make_post())
        voter = UserId(uuid4())
        await vote_service.cast_vote(post.id, voter, VoteType.UPVOTE)

        # Act
        updated = await comment_service.add_comment(
            post.id, voter, "Ada", "Lovelace", "voted and commented"
        )

        # Assert
        assert updated.vote_count == 1
        assert updated.vote_of(voter).type == VoteType.UPVOTE
