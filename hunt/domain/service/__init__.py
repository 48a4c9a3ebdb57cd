"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .image_service import ImageService, ImageStorage
from .jwt_service import JWTService
from .post_service import PostService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "ImageService",
    "ImageStorage",
    "JWTService",
    "PostService",
    "Service",
    "UserService",
    "VoteService",
]
