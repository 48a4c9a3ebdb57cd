"""Comment entity.

Comments live inside their post document and have no lifecycle of their own.
"""

from datetime import datetime

from pydantic import Field

from hunt.domain.model.common import DomainModel, utcnow
from hunt.domain.value import CommentId, UserId


class Comment(DomainModel):
    """A comment on a post with a snapshot of its author's name."""

    id: CommentId
    user_id: UserId
    first_name: str
    last_name: str
    text: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=utcnow)
