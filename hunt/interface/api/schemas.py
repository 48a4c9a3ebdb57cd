"""Response envelopes shared by all routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from hunt.application.usecase.views import UserView

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Successful response: ``{"success": true, "data": ...}``."""

    success: bool = True
    data: T


class AuthApiResponse(BaseModel):
    """Successful sign-in: ``{"success": true, "token": ..., "user": ...}``."""

    success: bool = True
    token: str
    user: UserView


class ErrorResponse(BaseModel):
    """Failed request: ``{"success": false, "message": ...}``."""

    success: bool = False
    message: str
