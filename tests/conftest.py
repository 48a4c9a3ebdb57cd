"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone
from uuid import uuid4

import logfire

# Cheapest bcrypt cost; must be set before any Settings() is created
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

logfire.configure(send_to_logfire=False, console=False)

from hunt.domain.model import Post  # noqa: E402
from hunt.domain.value import PostId, UserId  # noqa: E402


def make_post(
    author_id: UserId | None = None,
    title: str = "Test Post",
    created_at: datetime | None = None,
) -> Post:
    """Build a fresh post with no comments or votes.

    Args:
        author_id: Author (random when omitted)
        title: Post title
        created_at: Creation time (now when omitted)

    Returns:
        Post domain model at version 0
    """
    now = created_at or datetime.now(timezone.utc)
    return Post(
        id=PostId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        first_name="Ada",
        last_name="Lovelace",
        title=title,
        caption="A caption",
        image_url="https://storage.test/image.png",
        body="Post body",
        created_at=now,
        updated_at=now,
    )
