"""Read models returned to API clients."""

from datetime import datetime

from pydantic import Field

from hunt.domain.model import Comment, Post, User, Vote
from hunt.domain.value import VoteType

from .base import CamelModel


class VoteView(CamelModel):
    """A voter and the kind of vote they hold."""

    user_id: str
    type: VoteType

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteView":
        return cls(user_id=str(vote.user_id), type=vote.type)


class CommentView(CamelModel):
    """A comment with its author snapshot."""

    id: str
    user_id: str
    first_name: str
    last_name: str
    text: str = Field(alias="comment")
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            user_id=str(comment.user_id),
            first_name=comment.first_name,
            last_name=comment.last_name,
            text=comment.text,
            created_at=comment.created_at,
        )


class PostView(CamelModel):
    """A post with its comments, votes and vote count."""

    id: str
    user_id: str
    first_name: str
    last_name: str
    title: str
    caption: str
    image_url: str
    body: str = Field(alias="post")
    comments: list[CommentView]
    votes: list[VoteView]
    vote_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostView":
        """Build the view of a post.

        Votes are listed in the order they were first cast.
        """
        return cls(
            id=str(post.id),
            user_id=str(post.author_id),
            first_name=post.first_name,
            last_name=post.last_name,
            title=post.title,
            caption=post.caption,
            image_url=post.image_url,
            body=post.body,
            comments=[CommentView.from_comment(c) for c in post.comments],
            votes=[VoteView.from_vote(v) for v in post.votes.values()],
            vote_count=post.vote_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class UserView(CamelModel):
    """Public profile of a user. Never carries the password hash."""

    id: str
    first_name: str
    last_name: str
    email: str
    location: str
    profile_picture: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email.root,
            location=user.location,
            profile_picture=user.profile_picture,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
