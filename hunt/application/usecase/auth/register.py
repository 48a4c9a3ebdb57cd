"""Register use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hunt.domain.error import ValidationError
from hunt.domain.service import JWTService, UserService
from hunt.domain.value import Email

from ..views import UserView
from .login import AuthResponse


class RegisterRequest(BaseModel):
    """Register request."""

    first_name: str
    last_name: str
    email: str
    location: str
    password: str
    confirm_password: str | None = None


class RegisterUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute register flow.

        Args:
            request: Register request

        Returns:
            Token and public profile of the new user

        Raises:
            ValidationError: If the email is malformed or taken, the password
                is rejected or the confirmation doesn't match
        """
        if (
            request.confirm_password is not None
            and request.confirm_password != request.password
        ):
            raise ValidationError("Passwords do not match")

        try:
            email = Email(request.email)
        except PydanticValidationError:
            raise ValidationError("Please provide a valid email")

        try:
            user = await self.user_service.register(
                first_name=request.first_name.strip(),
                last_name=request.last_name.strip(),
                email=email,
                location=request.location.strip(),
                password=request.password,
            )
        except PydanticValidationError as e:
            # Profile fields outside the User model's bounds
            logfire.warn("Registration rejected", error=str(e))
            raise ValidationError("Please fill in all fields correctly")

        token = self.jwt_service.create_token(user)
        return AuthResponse(token=token, user=UserView.from_user(user))
