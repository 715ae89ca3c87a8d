"""Auth use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .register import RegisterRequest, RegisterResponse, RegisterUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
]
