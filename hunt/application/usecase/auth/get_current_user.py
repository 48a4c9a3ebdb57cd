"""Get current user use case."""

from pydantic import BaseModel

from hunt.domain.error import UnauthenticatedError
from hunt.domain.service import JWTService
from hunt.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class CurrentUser(BaseModel):
    """Caller identity carried by a verified token."""

    user_id: str
    first_name: str
    last_name: str
    email: str
    location: str


class GetCurrentUserUseCase:
    """Use case for resolving the caller from a bearer token.

    Reads only the token; no storage is touched, so an unauthenticated
    request fails before any repository access.
    """

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
        """
        self.jwt_service = jwt_service

    async def execute(self, request: GetCurrentUserRequest) -> CurrentUser:
        """Execute get current user flow.

        Args:
            request: Request with JWT token

        Returns:
            Identity snapshot from the token

        Raises:
            UnauthenticatedError: If token is invalid or expired
        """
        try:
            payload = self.jwt_service.verify_token(request.token)
        except JWTError as e:
            raise UnauthenticatedError(str(e))

        return CurrentUser(
            user_id=payload.user_id,
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            location=payload.location,
        )
