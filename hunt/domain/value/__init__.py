"""Domain value objects."""

from hunt.domain.value.identifiers import CommentId, PostId, UserId
from hunt.domain.value.types import Email, VoteType

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Email",
    "VoteType",
]
