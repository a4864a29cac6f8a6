"""Update user profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.domain.service import UserService
from inkwell.domain.value import UserId, UserRole


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: str  # From the authenticated session
    name: str | None = Field(default=None, min_length=1, max_length=100)
    image: str | None = None


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    user_id: str
    email: str
    name: str | None
    image: str | None
    role: UserRole


class UpdateUserProfileUseCase:
    """Use case for updating the current user's name and avatar."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update profile flow.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.update_profile(
            user_id=UserId(UUID(request.user_id)),
            name=request.name,
            image=request.image,
        )

        return UpdateUserProfileResponse(
            user_id=str(user.id),
            email=user.email.root,
            name=user.name,
            image=user.image,
            role=user.role,
        )
