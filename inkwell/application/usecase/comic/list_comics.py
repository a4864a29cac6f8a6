"""List comics use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from inkwell.domain.model import Comic
from inkwell.domain.repository import ComicSortOrder
from inkwell.domain.service import ComicService, GenreService
from inkwell.domain.value import ComicStatus, Slug


class ComicListItem(BaseModel):
    """Comic card in listings."""

    comic_id: str
    title: str
    slug: str
    cover_image: str
    status: ComicStatus
    rating: float
    views: int
    updated_at: datetime

    @classmethod
    def from_comic(cls, comic: Comic) -> "ComicListItem":
        return cls(
            comic_id=str(comic.id),
            title=comic.title,
            slug=comic.slug.root,
            cover_image=comic.cover_image,
            status=comic.status,
            rating=comic.rating,
            views=comic.views,
            updated_at=comic.updated_at,
        )


class ListComicsRequest(BaseModel):
    """List comics request."""

    search: str | None = Field(default=None, max_length=200)
    genre: str | None = None  # Genre slug
    status: ComicStatus | None = None
    sort: ComicSortOrder = ComicSortOrder.LATEST
    limit: int = Field(default=12, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListComicsResponse(BaseModel):
    """List comics response."""

    comics: list[ComicListItem]
    total: int
    limit: int
    offset: int


class ListComicsUseCase:
    """Use case for browsing the comic catalog."""

    def __init__(self, comic_service: ComicService, genre_service: GenreService) -> None:
        """Initialize list comics use case.

        Args:
            comic_service: Comic domain service
            genre_service: Genre domain service (resolves the genre filter)
        """
        self.comic_service = comic_service
        self.genre_service = genre_service

    async def execute(self, request: ListComicsRequest) -> ListComicsResponse:
        """Execute list comics flow.

        An unknown genre slug matches no comics rather than failing.
        """
        with logfire.span(
            "list_comics.execute",
            search=request.search,
            genre=request.genre,
            sort=request.sort.value,
        ):
            genre_id = None
            if request.genre:
                try:
                    genre = await self.genre_service.get_by_slug(Slug(request.genre))
                except ValueError:
                    genre = None
                if genre is None:
                    return ListComicsResponse(
                        comics=[], total=0, limit=request.limit, offset=request.offset
                    )
                genre_id = genre.id

            search = request.search.strip() if request.search else None
            comics, total = await self.comic_service.list_comics(
                search=search or None,
                genre_id=genre_id,
                status=request.status,
                sort=request.sort,
                limit=request.limit,
                offset=request.offset,
            )

            return ListComicsResponse(
                comics=[ComicListItem.from_comic(comic) for comic in comics],
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
