"""PostgreSQL repository implementations."""

from hunt.persistence.repository.post import PostgresPostRepository
from hunt.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
]
