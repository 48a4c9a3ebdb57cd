"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import Field

from hunt.application.usecase.base import CamelModel
from hunt.application.usecase.post import ListPostsRequest, ListPostsUseCase
from hunt.application.usecase.user import (
    GetUserRequest,
    GetUserUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
)
from hunt.application.usecase.views import PostView, UserView
from hunt.interface.api.auth import CurrentUserDep
from hunt.interface.api.schemas import ApiResponse

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserAPIRequest(CamelModel):
    """API request for updating your profile. Omitted fields are unchanged."""

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=255)
    location: str | None = Field(default=None, max_length=200)
    profile_picture: str | None = None
    password: str | None = None


@router.get("/me", response_model=ApiResponse[UserView])
async def get_me(
    get_user_use_case: FromDishka[GetUserUseCase],
    user: CurrentUserDep,
) -> ApiResponse[UserView]:
    """Get the caller's own profile."""
    profile = await get_user_use_case.execute(GetUserRequest(user_id=user.user_id))
    return ApiResponse(data=profile)


@router.put("/me", response_model=ApiResponse[UserView])
async def update_me(
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    user: CurrentUserDep,
) -> ApiResponse[UserView]:
    """Update the caller's own profile.

    Name changes don't rewrite the snapshots on existing posts and comments.
    """
    profile = await update_user_use_case.execute(
        UpdateUserRequest(user_id=user.user_id, **request.model_dump())
    )
    return ApiResponse(data=profile)


@router.get("/{user_id}", response_model=ApiResponse[UserView])
async def get_user(
    user_id: UUID,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> ApiResponse[UserView]:
    """Get a user's public profile."""
    profile = await get_user_use_case.execute(GetUserRequest(user_id=str(user_id)))
    return ApiResponse(data=profile)


@router.get("/{user_id}/posts", response_model=ApiResponse[list[PostView]])
async def list_user_posts(
    user_id: UUID,
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> ApiResponse[list[PostView]]:
    """List a user's posts, newest first."""
    posts = await list_posts_use_case.execute(
        ListPostsRequest(author_id=str(user_id))
    )
    return ApiResponse(data=posts)
