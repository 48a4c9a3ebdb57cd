"""Mock persistence providers for testing."""

from dishka import Scope, provide

from hunt.domain.repository import PostRepository, UserRepository
from hunt.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from hunt.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data survives across requests made through one
    container; every test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()
