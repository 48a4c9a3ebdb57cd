"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from hunt.domain.model import Comment, Post, User, Vote
from hunt.domain.value import Email, PostId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=Email(row["email"]),
        location=row["location"],
        password_hash=row["password_hash"],
        profile_picture=row.get("profile_picture") or "",
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Embedded comments and votes come back from JSONB as plain dicts; the
    vote list is re-keyed by voter.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    votes = [Vote.model_validate(v) for v in row.get("votes") or []]
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        first_name=row["first_name"],
        last_name=row["last_name"],
        title=row["title"],
        caption=row["caption"],
        image_url=row["image_url"],
        body=row["body"],
        comments=[Comment.model_validate(c) for c in row.get("comments") or []],
        votes={vote.user_id: vote for vote in votes},
        vote_count=row["vote_count"],
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update, with comments and votes
        serialised to JSON-compatible lists
    """
    data = post.model_dump(exclude={"comments", "votes"})
    data["comments"] = [c.model_dump(mode="json") for c in post.comments]
    data["votes"] = [v.model_dump(mode="json") for v in post.votes.values()]
    return data
