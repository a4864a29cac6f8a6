"""Change password use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.domain.service import AuthService
from inkwell.domain.value import UserId


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str  # From the authenticated session
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=1)


class ChangePasswordResponse(BaseModel):
    """Change password response."""

    success: bool


class ChangePasswordUseCase:
    """Use case for replacing the signed-in user's password."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: ChangePasswordRequest) -> ChangePasswordResponse:
        """Execute change password flow.

        Raises:
            NotFoundError: If user not found
            IncorrectPasswordError: If the current password is wrong
            ValueError: If the new password is too short
        """
        await self.auth_service.change_password(
            user_id=UserId(UUID(request.user_id)),
            current_password=request.current_password,
            new_password=request.new_password,
        )
        return ChangePasswordResponse(success=True)
