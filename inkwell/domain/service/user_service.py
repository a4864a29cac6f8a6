"""User domain service."""

import logfire

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import User
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import Email, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id))
            return user

    async def get_user_by_email(self, email: Email) -> User | None:
        """Get user by email.

        Args:
            email: Normalized email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found by email", user_id=str(user.id))
            else:
                logfire.info("No user with email")
            return user

    async def update_profile(
        self,
        user_id: UserId,
        name: str | None = None,
        image: str | None = None,
    ) -> User:
        """Update a user's display name and avatar.

        Only fields that are passed (not None) are changed.

        Args:
            user_id: User ID
            name: New display name
            image: New avatar URL

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            updates: dict = {"updated_at": utcnow()}
            if name is not None:
                updates["name"] = name
            if image is not None:
                updates["image"] = image

            updated = User.model_validate({**user.model_dump(), **updates})
            saved = await self.user_repository.save(updated)
            logfire.info(
                "User profile updated",
                user_id=str(user_id),
                fields=sorted(k for k in updates if k != "updated_at"),
            )
            return saved
