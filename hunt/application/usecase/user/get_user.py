"""Get user use case."""

from uuid import UUID

from pydantic import BaseModel

from hunt.domain.service import UserService
from hunt.domain.value import UserId

from ..views import UserView


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str  # UUID string


class GetUserUseCase:
    """Use case for reading a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserView:
        """Execute get user flow.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return UserView.from_user(user)
