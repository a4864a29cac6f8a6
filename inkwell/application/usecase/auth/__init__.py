"""Authentication use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .sign_in import SignInRequest, SignInResponse, SignInUseCase
from .sign_up import SignUpRequest, SignUpResponse, SignUpUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "SignInRequest",
    "SignInResponse",
    "SignInUseCase",
    "SignUpRequest",
    "SignUpResponse",
    "SignUpUseCase",
]
