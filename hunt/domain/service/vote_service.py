"""Vote domain service."""

import logfire

from hunt.domain.model import Post, VoteOutcome
from hunt.domain.value import PostId, UserId, VoteType

from .base import Service
from .post_service import PostService


class VoteService(Service):
    """Domain service for voting on posts."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize vote service.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def cast_vote(
        self, post_id: PostId, voter_id: UserId, vote_type: VoteType
    ) -> Post:
        """Cast a vote on a post.

        Inserts, withdraws or flips the voter's vote and adjusts the post's
        vote count in the same conditional write, so the ledger and the
        aggregate are never stored out of step.

        Args:
            post_id: Post ID
            voter_id: Voting user ID
            vote_type: Kind of vote being cast

        Returns:
            The full updated post

        Raises:
            NotFoundError: If post not found (nothing is written)
            ConflictError: If the write kept losing races
        """
        with logfire.span(
            "vote_service.cast_vote",
            post_id=str(post_id),
            voter_id=str(voter_id),
            vote_type=vote_type.value,
        ):
            outcomes: list[VoteOutcome] = []

            def cast(post: Post) -> Post:
                updated, outcome = post.cast_vote(voter_id, vote_type)
                outcomes.append(outcome)
                return updated

            saved = await self.post_service.apply_change(post_id, cast)

            # The last outcome is the one that was stored
            outcome = outcomes[-1]
            logfire.info(
                "Vote applied",
                post_id=str(post_id),
                voter_id=str(voter_id),
                action=outcome.action.value,
                delta=outcome.delta,
                vote_count=saved.vote_count,
                attempts=len(outcomes),
            )
            return saved
