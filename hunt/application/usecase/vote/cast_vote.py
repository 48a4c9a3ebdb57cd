"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from hunt.domain.service import VoteService
from hunt.domain.value import PostId, UserId, VoteType

from ..views import PostView


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    type: VoteType


class CastVoteUseCase:
    """Use case for upvoting or downvoting a post.

    Repeating the vote you already hold withdraws it; casting the other
    kind flips it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> PostView:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The full updated post

        Raises:
            NotFoundError: If post not found
            ConflictError: If the vote kept losing write races
        """
        post = await self.vote_service.cast_vote(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id)), request.type
        )
        return PostView.from_post(post)
