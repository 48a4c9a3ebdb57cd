"""Bearer token authentication for routes.

Protected routes take the caller as a dependency::

    async def vote(post_id: UUID, request: VoteAPIRequest, user: CurrentUserDep):
        ...

FastAPI resolves dependencies before it validates the request body, so a
request without a valid token is rejected with 401 whatever its body holds.
"""

from typing import Annotated

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hunt.application.usecase.auth import (
    CurrentUser,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from hunt.domain.error import UnauthenticatedError

# Missing credentials are reported by get_current_user() so they get the
# standard error envelope.
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CurrentUser:
    """Resolve the caller from the request's bearer token.

    Args:
        get_current_user_use_case: Get current user use case
        credentials: Parsed ``Authorization`` header, if any

    Returns:
        The caller's identity

    Raises:
        UnauthenticatedError: If no token was sent or it doesn't verify
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("Not authenticated")

    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=credentials.credentials)
    )


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
