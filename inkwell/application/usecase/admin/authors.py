"""Admin author management use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.domain.service import AuthorService, UserService
from inkwell.domain.value import AuthorId

from ..catalog.list_authors import AuthorItem
from .base import AdminUseCase


class CreateAuthorRequest(BaseModel):
    """Create author request."""

    user_id: str
    name: str = Field(min_length=1, max_length=200)
    bio: str | None = None
    image: str | None = None


class UpdateAuthorRequest(BaseModel):
    """Update author request."""

    user_id: str
    author_id: str
    name: str | None = Field(default=None, min_length=1, max_length=200)
    bio: str | None = None
    image: str | None = None


class DeleteAuthorRequest(BaseModel):
    """Delete author request."""

    user_id: str
    author_id: str


class CreateAuthorUseCase(AdminUseCase):
    """Use case for adding an author."""

    def __init__(self, user_service: UserService, author_service: AuthorService) -> None:
        super().__init__(user_service)
        self.author_service = author_service

    async def execute(self, request: CreateAuthorRequest) -> AuthorItem:
        await self.require_admin(request.user_id)
        author = await self.author_service.create_author(
            name=request.name, bio=request.bio, image=request.image
        )
        return AuthorItem.from_author(author)


class UpdateAuthorUseCase(AdminUseCase):
    """Use case for editing an author."""

    def __init__(self, user_service: UserService, author_service: AuthorService) -> None:
        super().__init__(user_service)
        self.author_service = author_service

    async def execute(self, request: UpdateAuthorRequest) -> AuthorItem:
        """Execute update author flow.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
            NotFoundError: If the author doesn't exist
        """
        await self.require_admin(request.user_id)
        author = await self.author_service.update_author(
            AuthorId(UUID(request.author_id)),
            name=request.name,
            bio=request.bio,
            image=request.image,
        )
        return AuthorItem.from_author(author)


class DeleteAuthorUseCase(AdminUseCase):
    """Use case for removing an author. Their comics become uncredited."""

    def __init__(self, user_service: UserService, author_service: AuthorService) -> None:
        super().__init__(user_service)
        self.author_service = author_service

    async def execute(self, request: DeleteAuthorRequest) -> None:
        await self.require_admin(request.user_id)
        await self.author_service.delete_author(AuthorId(UUID(request.author_id)))
