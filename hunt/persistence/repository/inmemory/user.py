"""In-memory user repository for testing."""

from typing import Optional

from hunt.domain.error import ValidationError
from hunt.domain.model.user import User
from hunt.domain.repository.user import UserRepository
from hunt.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def _email_taken(self, email: Email, user_id: UserId) -> bool:
        return any(
            u.email == email and u.id != user_id for u in self._users.values()
        )

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def create(self, user: User) -> User:
        """Insert a new user (emails are unique)."""
        if self._email_taken(user.email, user.id):
            raise ValidationError("User already exists")
        self._users[user.id] = user
        return user

    async def update(self, user: User) -> Optional[User]:
        """Replace a stored user's profile."""
        if user.id not in self._users:
            return None
        if self._email_taken(user.email, user.id):
            raise ValidationError("Email is already in use")
        self._users[user.id] = user
        return user
