"""Auth use cases."""

from .get_current_user import (
    CurrentUser,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from .login import AuthResponse, LoginRequest, LoginUseCase
from .register import RegisterRequest, RegisterUseCase

__all__ = [
    "AuthResponse",
    "CurrentUser",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
]
