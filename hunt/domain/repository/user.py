"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hunt.domain.model.user import User
from hunt.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for the User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The stored user

        Raises:
            ValidationError: If the email is already registered
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> Optional[User]:
        """Replace a stored user's profile.

        Args:
            user: The modified user

        Returns:
            The stored user, or None if the user doesn't exist

        Raises:
            ValidationError: If the new email belongs to another user
        """
        pass
