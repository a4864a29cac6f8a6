"""Comic domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from inkwell.domain.error import AlreadyExistsError, NotFoundError
from inkwell.domain.model import Comic
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import ComicRepository, ComicSortOrder
from inkwell.domain.value import AuthorId, ComicId, ComicStatus, GenreId, Slug

from .base import Service


class ComicService(Service):
    """Domain service for comic operations."""

    def __init__(self, comic_repository: ComicRepository) -> None:
        """Initialize comic service.

        Args:
            comic_repository: Comic repository
        """
        self.comic_repository = comic_repository

    async def list_comics(
        self,
        search: str | None = None,
        genre_id: GenreId | None = None,
        status: ComicStatus | None = None,
        sort: ComicSortOrder = ComicSortOrder.LATEST,
        limit: int = 12,
        offset: int = 0,
    ) -> tuple[list[Comic], int]:
        """List comics with filters and pagination.

        Args:
            search: Case-insensitive title substring
            genre_id: Only comics in this genre
            status: Only comics with this status
            sort: Sort order
            limit: Page size
            offset: Number of comics to skip

        Returns:
            Tuple of (comics on the page, total matching comics)
        """
        with logfire.span(
            "comic_service.list_comics",
            search=search,
            genre_id=str(genre_id) if genre_id else None,
            status=status.value if status else None,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            comics = await self.comic_repository.find_all(
                search=search,
                genre_id=genre_id,
                status=status,
                sort=sort,
                limit=limit,
                offset=offset,
            )
            total = await self.comic_repository.count(
                search=search, genre_id=genre_id, status=status
            )
            logfire.info("Comics listed", count=len(comics), total=total)
            return comics, total

    async def get_by_id(self, comic_id: ComicId) -> Comic | None:
        """Get a comic by ID.

        Args:
            comic_id: Comic ID

        Returns:
            Comic if found, None otherwise
        """
        with logfire.span("comic_service.get_by_id", comic_id=str(comic_id)):
            comic = await self.comic_repository.find_by_id(comic_id)
            if not comic:
                logfire.warn("Comic not found", comic_id=str(comic_id))
            return comic

    async def get_by_slug(self, slug: Slug) -> Comic | None:
        """Get a comic by slug.

        Args:
            slug: Comic slug

        Returns:
            Comic if found, None otherwise
        """
        with logfire.span("comic_service.get_by_slug", slug=slug.root):
            comic = await self.comic_repository.find_by_slug(slug)
            if comic:
                logfire.info("Comic found by slug", comic_id=str(comic.id))
            else:
                logfire.warn("Comic not found by slug", slug=slug.root)
            return comic

    async def get_by_ids(self, comic_ids: list[ComicId]) -> dict[ComicId, Comic]:
        """Batch fetch comics, keyed by ID (avoids N+1 for listings)."""
        if not comic_ids:
            return {}
        comics = await self.comic_repository.find_by_ids(comic_ids)
        return {comic.id: comic for comic in comics}

    async def create_comic(
        self,
        title: str,
        slug: Slug | None = None,
        description: str = "",
        cover_image: str = "",
        status: ComicStatus = ComicStatus.ONGOING,
        publication_date: datetime | None = None,
        author_id: AuthorId | None = None,
        genre_ids: list[GenreId] | None = None,
    ) -> Comic:
        """Create a comic.

        The slug is derived from the title when not given.

        Returns:
            Created comic

        Raises:
            AlreadyExistsError: If the title or slug is taken
        """
        with logfire.span("comic_service.create_comic", title=title):
            comic = Comic(
                id=ComicId(uuid4()),
                title=title,
                slug=slug or Slug.from_text(title, fallback="comic"),
                description=description,
                cover_image=cover_image,
                status=status,
                publication_date=publication_date,
                author_id=author_id,
                genre_ids=list(dict.fromkeys(genre_ids or [])),
            )
            try:
                saved = await self.comic_repository.save(comic)
            except IntegrityError:
                logfire.warn("Duplicate comic", title=title, slug=comic.slug.root)
                raise AlreadyExistsError("Comic", comic.slug.root)

            logfire.info("Comic created", comic_id=str(saved.id), slug=saved.slug.root)
            return saved

    async def update_comic(self, comic_id: ComicId, **changes) -> Comic:
        """Update a comic.

        Args:
            comic_id: Comic ID
            **changes: Comic fields to overwrite (title, slug, description,
                cover_image, status, publication_date, author_id, genre_ids)

        Returns:
            Updated comic

        Raises:
            NotFoundError: If comic not found
            AlreadyExistsError: If the new title or slug is taken
        """
        with logfire.span(
            "comic_service.update_comic",
            comic_id=str(comic_id),
            fields=sorted(changes),
        ):
            comic = await self.comic_repository.find_by_id(comic_id)
            if not comic:
                raise NotFoundError("Comic", str(comic_id))

            if "genre_ids" in changes:
                changes["genre_ids"] = list(dict.fromkeys(changes["genre_ids"]))
            updated = comic.model_copy(update={**changes, "updated_at": utcnow()})

            try:
                saved = await self.comic_repository.save(updated)
            except IntegrityError:
                logfire.warn("Duplicate comic on update", comic_id=str(comic_id))
                raise AlreadyExistsError("Comic", updated.slug.root)

            logfire.info("Comic updated", comic_id=str(comic_id))
            return saved

    async def delete_comic(self, comic_id: ComicId) -> None:
        """Delete a comic with its chapters and reader data.

        Raises:
            NotFoundError: If comic not found
        """
        with logfire.span("comic_service.delete_comic", comic_id=str(comic_id)):
            deleted = await self.comic_repository.delete(comic_id)
            if not deleted:
                raise NotFoundError("Comic", str(comic_id))
            logfire.info("Comic deleted", comic_id=str(comic_id))

    async def increment_views(self, comic_id: ComicId) -> None:
        """Atomically increment comic views.

        Args:
            comic_id: Comic ID
        """
        with logfire.span("comic_service.increment_views", comic_id=str(comic_id)):
            await self.comic_repository.increment_views(comic_id)

    async def update_rating(self, comic_id: ComicId, rating: float) -> None:
        """Store the comic's average rating.

        Args:
            comic_id: Comic ID
            rating: Average rating (0 when unrated)
        """
        with logfire.span(
            "comic_service.update_rating", comic_id=str(comic_id), rating=rating
        ):
            await self.comic_repository.update_rating(comic_id, rating)
            logfire.info("Comic rating updated", comic_id=str(comic_id), rating=rating)
