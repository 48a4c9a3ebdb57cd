"""Login use case."""

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hunt.domain.error import UnauthenticatedError
from hunt.domain.service import JWTService, UserService
from hunt.domain.value import Email

from ..views import UserView


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class AuthResponse(BaseModel):
    """Token issued for a signed-in user."""

    token: str
    user: UserView


class LoginUseCase:
    """Use case for email/password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Args:
            request: Login request

        Returns:
            Token and public profile of the user

        Raises:
            UnauthenticatedError: If the credentials don't match an account
        """
        try:
            email = Email(request.email)
        except PydanticValidationError:
            # No account can have a malformed email
            raise UnauthenticatedError("Invalid credentials")

        user = await self.user_service.authenticate(email, request.password)
        token = self.jwt_service.create_token(user)
        return AuthResponse(token=token, user=UserView.from_user(user))
