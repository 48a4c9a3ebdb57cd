"""Update user profile use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hunt.domain.error import ValidationError
from hunt.domain.service import UserService
from hunt.domain.value import Email, UserId

from ..views import UserView


class UpdateUserRequest(BaseModel):
    """Update user profile request. Unset fields are left unchanged."""

    user_id: str  # User ID from authenticated user
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    location: str | None = None
    profile_picture: str | None = None
    password: str | None = None


class UpdateUserUseCase:
    """Use case for a user editing their own profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserView:
        """Execute update user flow.

        Args:
            request: Update request

        Returns:
            The updated profile

        Raises:
            NotFoundError: If user not found
            ValidationError: If a new value is rejected
        """
        changes = request.model_dump(exclude={"user_id"}, exclude_none=True)
        for field in ("first_name", "last_name", "location", "profile_picture"):
            if field in changes:
                changes[field] = changes[field].strip()

        try:
            if "email" in changes:
                changes["email"] = Email(changes["email"])
            user = await self.user_service.update_profile(
                UserId(UUID(request.user_id)), changes
            )
        except PydanticValidationError as e:
            logfire.warn("Profile update validation error", error=str(e))
            raise ValidationError("Please fill in all fields correctly")

        return UserView.from_user(user)
