"""Shared admin use case behaviour."""

from uuid import UUID

import logfire

from inkwell.domain.error import NotAuthorizedError
from inkwell.domain.model import User
from inkwell.domain.service import UserService
from inkwell.domain.value import UserId

from ..base import BaseUseCase


class AdminUseCase(BaseUseCase):
    """Base for back-office use cases.

    The role is read from the stored account, not from the token, so a
    demoted admin loses access immediately.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def require_admin(self, user_id: str) -> User:
        """Load the acting user and check they are an admin.

        Raises:
            NotFoundError: If the user doesn't exist
            NotAuthorizedError: If the user is not an admin
        """
        user = await self.user_service.get_by_id(UserId(UUID(user_id)))
        if not user.is_admin:
            logfire.warn("Admin action by non-admin", user_id=user_id)
            raise NotAuthorizedError("admin", "catalog", user_id)
        return user
