"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import Field

from hunt.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from hunt.application.usecase.base import CamelModel
from hunt.interface.api.schemas import AuthApiResponse

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(CamelModel):
    """API request for registering."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=255)
    location: str = Field(min_length=1, max_length=200)
    password: str = Field(min_length=1)
    confirm_password: str | None = None


class LoginAPIRequest(CamelModel):
    """API request for logging in."""

    email: str
    password: str


@router.post(
    "/register", response_model=AuthApiResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthApiResponse:
    """Create an account and return a token for it.

    Returns:
        Token and public profile of the new user
    """
    result = await register_use_case.execute(
        RegisterRequest(**request.model_dump())
    )
    return AuthApiResponse(token=result.token, user=result.user)


@router.post("/login", response_model=AuthApiResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthApiResponse:
    """Exchange email and password for a token.

    Returns:
        Token and public profile of the user
    """
    result = await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )
    return AuthApiResponse(token=result.token, user=result.user)
