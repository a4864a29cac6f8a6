"""Get comic detail use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import NotFoundError
from inkwell.domain.service import (
    AuthorService,
    ChapterService,
    ComicService,
    GenreService,
    RatingService,
)
from inkwell.domain.value import ComicStatus, Slug, UserId


class AuthorInfo(BaseModel):
    """Author credited on a comic."""

    author_id: str
    name: str
    image: str | None


class GenreInfo(BaseModel):
    """Genre of a comic."""

    genre_id: str
    name: str
    slug: str


class ChapterListItem(BaseModel):
    """Chapter entry in a comic's table of contents."""

    chapter_id: str
    chapter_number: int
    title: str
    release_date: datetime
    views: int


class GetComicRequest(BaseModel):
    """Get comic request."""

    slug: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetComicResponse(BaseModel):
    """Comic detail response."""

    comic_id: str
    title: str
    slug: str
    description: str
    cover_image: str
    status: ComicStatus
    publication_date: datetime | None
    views: int
    author: AuthorInfo | None
    genres: list[GenreInfo]
    chapters: list[ChapterListItem]
    average_rating: float
    total_ratings: int
    user_rating: int | None
    created_at: datetime
    updated_at: datetime


class GetComicUseCase:
    """Use case for the comic detail page."""

    def __init__(
        self,
        comic_service: ComicService,
        chapter_service: ChapterService,
        author_service: AuthorService,
        genre_service: GenreService,
        rating_service: RatingService,
    ) -> None:
        self.comic_service = comic_service
        self.chapter_service = chapter_service
        self.author_service = author_service
        self.genre_service = genre_service
        self.rating_service = rating_service

    async def execute(self, request: GetComicRequest) -> GetComicResponse:
        """Execute get comic flow.

        Every successful view increments the comic's view counter.

        Raises:
            NotFoundError: If no comic has the slug
        """
        try:
            slug = Slug(request.slug)
        except ValueError:
            raise NotFoundError("Comic", request.slug)

        comic = await self.comic_service.get_by_slug(slug)
        if comic is None:
            raise NotFoundError("Comic", request.slug)

        await self.comic_service.increment_views(comic.id)

        author = (
            await self.author_service.get_by_id(comic.author_id)
            if comic.author_id
            else None
        )
        genres = await self.genre_service.get_by_ids(comic.genre_ids)
        chapters = await self.chapter_service.list_chapters(comic.id)
        stats = await self.rating_service.get_rating_stats(comic.id)

        user_rating = None
        if request.user_id:
            rating = await self.rating_service.get_user_rating(
                UserId(UUID(request.user_id)), comic.id
            )
            user_rating = rating.rating if rating else None

        return GetComicResponse(
            comic_id=str(comic.id),
            title=comic.title,
            slug=comic.slug.root,
            description=comic.description,
            cover_image=comic.cover_image,
            status=comic.status,
            publication_date=comic.publication_date,
            views=comic.views + 1,
            author=(
                AuthorInfo(author_id=str(author.id), name=author.name, image=author.image)
                if author
                else None
            ),
            genres=[
                GenreInfo(genre_id=str(g.id), name=g.name, slug=g.slug.root)
                for g in genres
            ],
            chapters=[
                ChapterListItem(
                    chapter_id=str(c.id),
                    chapter_number=c.chapter_number,
                    title=c.title,
                    release_date=c.release_date,
                    views=c.views,
                )
                for c in chapters
            ],
            average_rating=stats.average_rating,
            total_ratings=stats.total_ratings,
            user_rating=user_rating,
            created_at=comic.created_at,
            updated_at=comic.updated_at,
        )
