"""Domain layer DI providers."""

from dishka import Scope, provide

from hunt.config import AuthSettings, PostSettings, StorageSettings
from hunt.domain.repository import PostRepository, UserRepository
from hunt.domain.service import (
    CommentService,
    ImageService,
    ImageStorage,
    JWTService,
    PostService,
    UserService,
    VoteService,
)
from hunt.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, post_settings: PostSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, post_settings=post_settings)

    @provide
    def get_vote_service(self, post_service: PostService) -> VoteService:
        """Provide vote domain service."""
        return VoteService(post_service=post_service)

    @provide
    def get_comment_service(self, post_service: PostService) -> CommentService:
        """Provide comment domain service."""
        return CommentService(post_service=post_service)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_image_service(
        self, storage: ImageStorage, storage_settings: StorageSettings
    ) -> ImageService:
        """Provide image upload domain service."""
        return ImageService(storage=storage, storage_settings=storage_settings)
