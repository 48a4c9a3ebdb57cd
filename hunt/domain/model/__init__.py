"""Domain model entities."""

from hunt.domain.model.comment import Comment
from hunt.domain.model.post import Post
from hunt.domain.model.user import User
from hunt.domain.model.vote import Vote, VoteAction, VoteOutcome, apply_vote, tally

__all__ = [
    "User",
    "Post",
    "Comment",
    "Vote",
    "VoteAction",
    "VoteOutcome",
    "apply_vote",
    "tally",
]
