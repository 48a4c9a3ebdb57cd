"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from hunt.domain.value.common import RootValueObject

EMAIL_PATTERN = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,}$")


class VoteType(str, Enum):
    """Direction of a vote on a post."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"

    @property
    def weight(self) -> int:
        """Contribution of one vote of this kind to a post's vote count."""
        return 1 if self is VoteType.UPVOTE else -1


class Email(RootValueObject[str]):
    """User email address, normalised to lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate email shape."""
        v = v.strip().lower()
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Please provide a valid email")
        return v
