"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from hunt.config import Settings
from hunt.domain.repository import PostRepository, UserRepository
from hunt.persistence.database import create_engine, create_session_factory
from hunt.persistence.repository import (
    PostgresPostRepository,
    PostgresUserRepository,
)
from hunt.util.di.base import ProviderBase
from hunt.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories, one transaction per request."""

    __is_mock__ = False

    # Repositories take the request's session in their constructor
    user_repository = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    post_repository = provide(
        PostgresPostRepository, provides=PostRepository, scope=Scope.REQUEST
    )

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the engine, disposed of when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide the request's session.

        Commits when the request scope closes cleanly and rolls back if the
        request failed, so a vote or comment is stored only with a success
        response.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn(
                    "Request transaction rolled back",
                    error_type=type(e).__name__,
                    error=str(e),
                )
                await session.rollback()
                raise
