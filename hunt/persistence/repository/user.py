"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.domain.error import ValidationError
from hunt.domain.model import User
from hunt.domain.repository import UserRepository
from hunt.domain.value import Email, UserId
from hunt.persistence.mappers import row_to_user, user_to_dict
from hunt.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: User to insert

        Returns:
            Saved user

        Raises:
            ValidationError: If the email is already registered
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            raise ValidationError("User already exists") from e
        return user

    async def update(self, user: User) -> Optional[User]:
        """Replace a stored user's profile.

        Args:
            user: User with new values

        Returns:
            Saved user, or None if no such user

        Raises:
            ValidationError: If the email belongs to another user
        """
        values = user_to_dict(user)
        values.pop("id")
        values.pop("created_at")
        stmt = (
            users_table.update()
            .where(users_table.c.id == user.id)
            .values(**values)
            .returning(users_table)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            raise ValidationError("Email is already in use") from e

        row = result.mappings().first()
        await self.session.flush()
        return row_to_user(dict(row)) if row else None
