"""Admin comic management use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import Comic
from inkwell.domain.service import AuthorService, ComicService, GenreService, UserService
from inkwell.domain.value import AuthorId, ComicId, ComicStatus, GenreId, Slug

from .base import AdminUseCase


class AdminComicResponse(BaseModel):
    """Comic as seen by the back office."""

    comic_id: str
    title: str
    slug: str
    description: str
    cover_image: str
    status: ComicStatus
    publication_date: datetime | None
    author_id: str | None
    genre_ids: list[str]
    rating: float
    views: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comic(cls, comic: Comic) -> "AdminComicResponse":
        return cls(
            comic_id=str(comic.id),
            title=comic.title,
            slug=comic.slug.root,
            description=comic.description,
            cover_image=comic.cover_image,
            status=comic.status,
            publication_date=comic.publication_date,
            author_id=str(comic.author_id) if comic.author_id else None,
            genre_ids=[str(g) for g in comic.genre_ids],
            rating=comic.rating,
            views=comic.views,
            created_at=comic.created_at,
            updated_at=comic.updated_at,
        )


class CreateComicRequest(BaseModel):
    """Create comic request."""

    user_id: str  # Acting admin
    title: str = Field(min_length=1, max_length=300)
    slug: str | None = None
    description: str = ""
    cover_image: str = ""
    status: ComicStatus = ComicStatus.ONGOING
    publication_date: datetime | None = None
    author_id: str | None = None
    genre_ids: list[str] = Field(default_factory=list)


class UpdateComicRequest(BaseModel):
    """Update comic request. Only fields that are set are changed."""

    user_id: str
    comic_id: str
    title: str | None = Field(default=None, min_length=1, max_length=300)
    slug: str | None = None
    description: str | None = None
    cover_image: str | None = None
    status: ComicStatus | None = None
    publication_date: datetime | None = None
    author_id: str | None = None
    genre_ids: list[str] | None = None


class DeleteComicRequest(BaseModel):
    """Delete comic request."""

    user_id: str
    comic_id: str


class _ComicReferences:
    """Checks that the author and genres a comic points at exist."""

    author_service: AuthorService
    genre_service: GenreService

    async def _resolve_author(self, author_id: str | None) -> AuthorId | None:
        if author_id is None:
            return None
        resolved = AuthorId(UUID(author_id))
        if await self.author_service.get_by_id(resolved) is None:
            raise NotFoundError("Author", author_id)
        return resolved

    async def _resolve_genres(self, genre_ids: list[str]) -> list[GenreId]:
        resolved = [GenreId(UUID(g)) for g in genre_ids]
        await self.genre_service.validate_genres_exist(resolved)
        return resolved


class CreateComicUseCase(AdminUseCase, _ComicReferences):
    """Use case for adding a comic to the catalog."""

    def __init__(
        self,
        user_service: UserService,
        comic_service: ComicService,
        author_service: AuthorService,
        genre_service: GenreService,
    ) -> None:
        super().__init__(user_service)
        self.comic_service = comic_service
        self.author_service = author_service
        self.genre_service = genre_service

    async def execute(self, request: CreateComicRequest) -> AdminComicResponse:
        """Execute create comic flow.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
            NotFoundError: If the author doesn't exist
            ValueError: If a genre doesn't exist or the slug is malformed
            AlreadyExistsError: If the title or slug is taken
        """
        await self.require_admin(request.user_id)

        comic = await self.comic_service.create_comic(
            title=request.title,
            slug=Slug(request.slug) if request.slug else None,
            description=request.description,
            cover_image=request.cover_image,
            status=request.status,
            publication_date=request.publication_date,
            author_id=await self._resolve_author(request.author_id),
            genre_ids=await self._resolve_genres(request.genre_ids),
        )
        return AdminComicResponse.from_comic(comic)


class UpdateComicUseCase(AdminUseCase, _ComicReferences):
    """Use case for editing a comic."""

    def __init__(
        self,
        user_service: UserService,
        comic_service: ComicService,
        author_service: AuthorService,
        genre_service: GenreService,
    ) -> None:
        super().__init__(user_service)
        self.comic_service = comic_service
        self.author_service = author_service
        self.genre_service = genre_service

    async def execute(self, request: UpdateComicRequest) -> AdminComicResponse:
        """Execute update comic flow.

        Fields explicitly set to null in the request (author, publication
        date) are cleared; fields left out are unchanged.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
            NotFoundError: If the comic or author doesn't exist
            ValueError: If a genre doesn't exist
            AlreadyExistsError: If the new title or slug is taken
        """
        await self.require_admin(request.user_id)

        fields = request.model_fields_set
        changes: dict = {
            field: getattr(request, field)
            for field in ("title", "description", "cover_image", "status")
            if field in fields and getattr(request, field) is not None
        }
        if "publication_date" in fields:
            changes["publication_date"] = request.publication_date
        if "author_id" in fields:
            changes["author_id"] = await self._resolve_author(request.author_id)
        if request.slug is not None:
            changes["slug"] = Slug(request.slug)
        if request.genre_ids is not None:
            changes["genre_ids"] = await self._resolve_genres(request.genre_ids)

        comic = await self.comic_service.update_comic(
            ComicId(UUID(request.comic_id)), **changes
        )
        return AdminComicResponse.from_comic(comic)


class DeleteComicUseCase(AdminUseCase):
    """Use case for removing a comic with everything attached to it."""

    def __init__(self, user_service: UserService, comic_service: ComicService) -> None:
        super().__init__(user_service)
        self.comic_service = comic_service

    async def execute(self, request: DeleteComicRequest) -> None:
        """Execute delete comic flow.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
            NotFoundError: If the comic doesn't exist
        """
        await self.require_admin(request.user_id)
        await self.comic_service.delete_comic(ComicId(UUID(request.comic_id)))
