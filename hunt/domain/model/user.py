"""User aggregate root.

Users are the identity source for post, comment and vote authorship.
"""

from datetime import datetime

from pydantic import Field

from hunt.domain.model.common import DomainModel, utcnow
from hunt.domain.value import Email, UserId


class User(DomainModel):
    """User aggregate root.

    The password hash never leaves the domain and persistence layers;
    use cases build their own read models without it.
    """

    id: UserId
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: Email
    location: str = Field(min_length=1, max_length=200)
    password_hash: str
    profile_picture: str = ""
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
