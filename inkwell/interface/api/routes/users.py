"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from inkwell.application.usecase.user import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.interface.api.auth import require_user_id
from inkwell.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating user profile."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    image: str | None = Field(default=None, max_length=2000)


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the current user's password."""

    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=1, max_length=200)


@router.patch("/me", response_model=UpdateUserProfileResponse)
async def update_my_profile(
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateUserProfileResponse:
    """Update current user's display name and avatar.

    Example:
        PATCH /users/me
        Cookie: auth_token=...

        Request:
        {
            "name": "Alice",
            "image": "https://example.com/avatar.jpg"
        }
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(
                user_id=user_id, name=request.name, image=request.image
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update profile")


@router.post("/me/password", response_model=ChangePasswordResponse)
async def change_my_password(
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ChangePasswordResponse:
    """Change the current user's password.

    The auth cookie stays valid; only the next sign-in needs the new password.

    Raises:
        HTTPException: 401 if not signed in, 403 if the current password is
            wrong, 400 if the new password is too short
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await change_password_use_case.execute(
            ChangePasswordRequest(
                user_id=user_id,
                current_password=request.current_password,
                new_password=request.new_password,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "change password")
