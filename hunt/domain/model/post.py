"""Post aggregate root.

A post is stored as one document: its comments and votes are embedded and
only change through the post.
"""

from datetime import datetime

from pydantic import Field, model_validator

from hunt.domain.model.comment import Comment
from hunt.domain.model.common import DomainModel, utcnow
from hunt.domain.model.vote import Vote, VoteOutcome, apply_vote, tally
from hunt.domain.value import PostId, UserId, VoteType


class Post(DomainModel):
    """Post aggregate root.

    Invariants:
    - At most one vote per voter (votes are keyed by voter id)
    - vote_count equals upvotes minus downvotes in the ledger
    - comments are ordered most recent first

    ``version`` is bumped by the repository on every successful write and
    guards read-modify-write cycles against lost updates.
    """

    id: PostId
    author_id: UserId
    first_name: str
    last_name: str
    title: str = Field(min_length=1, max_length=300)
    caption: str = Field(min_length=1, max_length=1000)
    image_url: str = Field(min_length=1)
    body: str = Field(min_length=1, max_length=20000)
    comments: list[Comment] = Field(default_factory=list)
    votes: dict[UserId, Vote] = Field(default_factory=dict)
    vote_count: int = 0
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_vote_ledger(self) -> "Post":
        """Validate the ledger is keyed by voter and matches the aggregate."""
        for voter_id, vote in self.votes.items():
            if vote.user_id != voter_id:
                raise ValueError(
                    f"Vote keyed by {voter_id} belongs to {vote.user_id}"
                )
        expected = tally(self.votes)
        if self.vote_count != expected:
            raise ValueError(
                f"vote_count {self.vote_count} does not match ledger total {expected}"
            )
        return self

    def cast_vote(
        self, voter_id: UserId, vote_type: VoteType
    ) -> tuple["Post", VoteOutcome]:
        """Apply a voter's cast and return the updated post with the outcome.

        Votes don't touch updated_at; it tracks content edits.
        """
        outcome = apply_vote(self.votes, self.vote_count, voter_id, vote_type)
        updated = self.model_copy(
            update={"votes": outcome.votes, "vote_count": outcome.vote_count}
        )
        return updated, outcome

    def add_comment(self, comment: Comment) -> "Post":
        """Prepend a comment."""
        return self.model_copy(update={"comments": [comment, *self.comments]})

    def vote_of(self, voter_id: UserId) -> Vote | None:
        """The voter's current vote, if any."""
        return self.votes.get(voter_id)
