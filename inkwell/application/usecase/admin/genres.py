"""Admin genre management use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.domain.service import GenreService, UserService
from inkwell.domain.value import GenreId, Slug

from ..catalog.list_genres import GenreItem
from .base import AdminUseCase


class CreateGenreRequest(BaseModel):
    """Create genre request."""

    user_id: str
    name: str = Field(min_length=1, max_length=100)
    slug: str | None = None
    description: str | None = None


class UpdateGenreRequest(BaseModel):
    """Update genre request."""

    user_id: str
    genre_id: str
    name: str | None = Field(default=None, min_length=1, max_length=100)
    slug: str | None = None
    description: str | None = None


class DeleteGenreRequest(BaseModel):
    """Delete genre request."""

    user_id: str
    genre_id: str


class CreateGenreUseCase(AdminUseCase):
    """Use case for adding a genre."""

    def __init__(self, user_service: UserService, genre_service: GenreService) -> None:
        super().__init__(user_service)
        self.genre_service = genre_service

    async def execute(self, request: CreateGenreRequest) -> GenreItem:
        """Execute create genre flow.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
            ValueError: If the slug is malformed
            AlreadyExistsError: If the name or slug is taken
        """
        await self.require_admin(request.user_id)
        genre = await self.genre_service.create_genre(
            name=request.name,
            slug=Slug(request.slug) if request.slug else None,
            description=request.description,
        )
        return GenreItem.from_genre(genre)


class UpdateGenreUseCase(AdminUseCase):
    """Use case for editing a genre."""

    def __init__(self, user_service: UserService, genre_service: GenreService) -> None:
        super().__init__(user_service)
        self.genre_service = genre_service

    async def execute(self, request: UpdateGenreRequest) -> GenreItem:
        await self.require_admin(request.user_id)
        genre = await self.genre_service.update_genre(
            GenreId(UUID(request.genre_id)),
            name=request.name,
            slug=Slug(request.slug) if request.slug else None,
            description=request.description,
        )
        return GenreItem.from_genre(genre)


class DeleteGenreUseCase(AdminUseCase):
    """Use case for removing a genre. Comics keep their other genres."""

    def __init__(self, user_service: UserService, genre_service: GenreService) -> None:
        super().__init__(user_service)
        self.genre_service = genre_service

    async def execute(self, request: DeleteGenreRequest) -> None:
        await self.require_admin(request.user_id)
        await self.genre_service.delete_genre(GenreId(UUID(request.genre_id)))
