"""User domain service."""

from uuid import uuid4

import logfire

from hunt.config import AuthSettings
from hunt.domain.error import NotFoundError, UnauthenticatedError, ValidationError
from hunt.domain.model import User
from hunt.domain.model.common import utcnow
from hunt.domain.repository import UserRepository
from hunt.domain.value import Email, UserId
from hunt.util.password import hash_password, verify_password

from .base import Service

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72

# Profile fields a user may change on their own account
EDITABLE_FIELDS = frozenset(
    {"first_name", "last_name", "email", "location", "profile_picture", "password"}
)


class UserService(Service):
    """Domain service for user accounts and credentials."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (hash cost, password rules)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    def _check_password(self, password: str) -> None:
        if len(password) < self.auth_settings.min_password_length:
            raise ValidationError(
                "Password must be at least "
                f"{self.auth_settings.min_password_length} characters"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )

    def _hash(self, password: str) -> str:
        return hash_password(password, rounds=self.auth_settings.bcrypt_rounds)

    async def register(
        self,
        first_name: str,
        last_name: str,
        email: Email,
        location: str,
        password: str,
    ) -> User:
        """Register a new user.

        Args:
            first_name: First name
            last_name: Last name
            email: Email address (must be unused)
            location: Free-text location
            password: Plaintext password, hashed before storage

        Returns:
            Created user

        Raises:
            ValidationError: If the email is taken or the password is rejected
        """
        with logfire.span("user_service.register", email=email.root):
            self._check_password(password)

            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration with existing email", email=email.root)
                raise ValidationError("User already exists")

            now = utcnow()
            user = User(
                id=UserId(uuid4()),
                first_name=first_name,
                last_name=last_name,
                email=email,
                location=location,
                password_hash=self._hash(password),
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.create(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check a user's credentials.

        Unknown email and wrong password fail the same way.

        Args:
            email: Email address
            password: Plaintext password

        Returns:
            The authenticated user

        Raises:
            UnauthenticatedError: If the credentials don't match
        """
        with logfire.span("user_service.authenticate", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Invalid login attempt", email=email.root)
                raise UnauthenticatedError("Invalid credentials")

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id))
            return user

    async def update_profile(self, user_id: UserId, changes: dict) -> User:
        """Update a user's own profile.

        A ``password`` entry is hashed before it is stored. Name snapshots
        already copied into posts and comments are left as they are.

        Args:
            user_id: User ID
            changes: New values for any editable profile field

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            ValidationError: If the new email is taken or the password is rejected
            ValueError: If an unknown field is given
        """
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")

        with logfire.span(
            "user_service.update_profile",
            user_id=str(user_id),
            fields=sorted(changes),
        ):
            user = await self.get_by_id(user_id)
            update = dict(changes)

            password = update.pop("password", None)
            if password is not None:
                self._check_password(password)
                update["password_hash"] = self._hash(password)

            email = update.get("email")
            if email is not None and email != user.email:
                owner = await self.user_repository.find_by_email(email)
                if owner is not None and owner.id != user_id:
                    logfire.warn("Email already in use", user_id=str(user_id))
                    raise ValidationError("Email is already in use")

            updated = User.model_validate(
                {**user.model_dump(), **update, "updated_at": utcnow()}
            )
            saved = await self.user_repository.update(updated)
            if saved is None:
                raise NotFoundError("User", str(user_id))

            logfire.info("User profile updated", user_id=str(user_id))
            return saved
