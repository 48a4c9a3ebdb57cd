"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from hunt.domain.repository.post import PostRepository
from hunt.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
]
