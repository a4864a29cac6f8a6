"""Chapter domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from inkwell.domain.error import AlreadyExistsError, NotFoundError
from inkwell.domain.model import Chapter
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import ChapterRepository
from inkwell.domain.value import ChapterId, ComicId, Slug

from .base import Service


class ChapterService(Service):
    """Domain service for chapter operations."""

    def __init__(self, chapter_repository: ChapterRepository) -> None:
        """Initialize chapter service.

        Args:
            chapter_repository: Chapter repository
        """
        self.chapter_repository = chapter_repository

    async def get_by_id(self, chapter_id: ChapterId) -> Chapter | None:
        """Get a chapter by ID.

        Args:
            chapter_id: Chapter ID

        Returns:
            Chapter if found, None otherwise
        """
        with logfire.span("chapter_service.get_by_id", chapter_id=str(chapter_id)):
            chapter = await self.chapter_repository.find_by_id(chapter_id)
            if not chapter:
                logfire.warn("Chapter not found", chapter_id=str(chapter_id))
            return chapter

    async def get_by_number(
        self, comic_id: ComicId, chapter_number: int
    ) -> Chapter | None:
        """Get a chapter by its number within a comic.

        Args:
            comic_id: Comic ID
            chapter_number: Chapter number

        Returns:
            Chapter if found, None otherwise
        """
        with logfire.span(
            "chapter_service.get_by_number",
            comic_id=str(comic_id),
            chapter_number=chapter_number,
        ):
            chapter = await self.chapter_repository.find_by_comic_and_number(
                comic_id, chapter_number
            )
            if not chapter:
                logfire.warn(
                    "Chapter not found",
                    comic_id=str(comic_id),
                    chapter_number=chapter_number,
                )
            return chapter

    async def list_chapters(self, comic_id: ComicId) -> list[Chapter]:
        """Get all chapters of a comic, ordered by chapter number."""
        with logfire.span("chapter_service.list_chapters", comic_id=str(comic_id)):
            chapters = await self.chapter_repository.find_by_comic(comic_id)
            logfire.info("Chapters listed", comic_id=str(comic_id), count=len(chapters))
            return chapters

    async def get_neighbours(
        self, chapter: Chapter
    ) -> tuple[int | None, int | None]:
        """Numbers of the previous and next chapter of the same comic.

        Args:
            chapter: Current chapter

        Returns:
            Tuple of (previous number, next number); None at either end
        """
        chapters = await self.chapter_repository.find_by_comic(chapter.comic_id)
        numbers = [c.chapter_number for c in chapters]
        previous = [n for n in numbers if n < chapter.chapter_number]
        following = [n for n in numbers if n > chapter.chapter_number]
        return (
            max(previous) if previous else None,
            min(following) if following else None,
        )

    async def create_chapter(
        self,
        comic_id: ComicId,
        chapter_number: int,
        title: str,
        image_urls: list[str],
        slug: Slug | None = None,
        release_date: datetime | None = None,
    ) -> Chapter:
        """Create a chapter.

        Args:
            comic_id: Comic the chapter belongs to
            chapter_number: Number, unique within the comic
            title: Chapter title
            image_urls: Page image URLs in reading order
            slug: Optional slug, derived from the title when not given
            release_date: Release date, defaults to now

        Returns:
            Created chapter

        Raises:
            AlreadyExistsError: If the comic already has this chapter number
        """
        with logfire.span(
            "chapter_service.create_chapter",
            comic_id=str(comic_id),
            chapter_number=chapter_number,
        ):
            chapter = Chapter(
                id=ChapterId(uuid4()),
                comic_id=comic_id,
                chapter_number=chapter_number,
                title=title,
                slug=slug or Slug.from_text(title, fallback=f"chapter-{chapter_number}"),
                release_date=release_date or utcnow(),
                image_urls=image_urls,
            )
            try:
                saved = await self.chapter_repository.save(chapter)
            except IntegrityError:
                logfire.warn(
                    "Duplicate chapter number",
                    comic_id=str(comic_id),
                    chapter_number=chapter_number,
                )
                raise AlreadyExistsError(
                    "Chapter", f"{comic_id}#{chapter_number}"
                )

            logfire.info(
                "Chapter created",
                chapter_id=str(saved.id),
                comic_id=str(comic_id),
                chapter_number=chapter_number,
            )
            return saved

    async def delete_chapter(self, chapter_id: ChapterId) -> None:
        """Delete a chapter with its comments.

        Raises:
            NotFoundError: If chapter not found
        """
        with logfire.span("chapter_service.delete_chapter", chapter_id=str(chapter_id)):
            deleted = await self.chapter_repository.delete(chapter_id)
            if not deleted:
                raise NotFoundError("Chapter", str(chapter_id))
            logfire.info("Chapter deleted", chapter_id=str(chapter_id))

    async def increment_views(self, chapter_id: ChapterId) -> None:
        """Atomically increment chapter views."""
        with logfire.span(
            "chapter_service.increment_views", chapter_id=str(chapter_id)
        ):
            await self.chapter_repository.increment_views(chapter_id)
