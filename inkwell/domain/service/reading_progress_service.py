"""Reading progress domain service.

Progress is synced from the reader as the user scrolls through a chapter.
Each save is a single upsert keyed on (user_id, comic_id), so the latest
position always wins.
"""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from inkwell.domain.model import ReadingProgress
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import ReadingProgressRepository
from inkwell.domain.value import ChapterId, ComicId, ReadingProgressId, UserId

from .base import Service
from .chapter_service import ChapterService


class ReadingProgressService(Service):
    """Domain service for reading progress operations."""

    def __init__(
        self,
        reading_progress_repository: ReadingProgressRepository,
        chapter_service: ChapterService,
    ) -> None:
        """Initialize reading progress service.

        Args:
            reading_progress_repository: Reading progress repository
            chapter_service: Chapter domain service
        """
        self.reading_progress_repository = reading_progress_repository
        self.chapter_service = chapter_service

    async def save_progress(
        self,
        user_id: UserId,
        comic_id: ComicId,
        chapter_id: ChapterId,
        page_number: int = 0,
        scroll_position: int = 0,
        progress_percent: int = 0,
    ) -> ReadingProgress:
        """Save where the user is in a comic.

        Reaching 100% marks the comic completed; an earlier completion is
        kept by the repository when the user goes back to re-read.

        Args:
            user_id: User ID
            comic_id: Comic ID
            chapter_id: Chapter currently being read
            page_number: Page within the chapter
            scroll_position: Scroll position within the chapter (0-100)
            progress_percent: Overall progress through the comic (0-100)

        Returns:
            Stored progress

        Raises:
            ValueError: If the chapter doesn't belong to the comic or the
                progress could not be stored
        """
        with logfire.span(
            "reading_progress_service.save_progress",
            user_id=str(user_id),
            comic_id=str(comic_id),
            chapter_id=str(chapter_id),
            progress_percent=progress_percent,
        ):
            chapter = await self.chapter_service.get_by_id(chapter_id)
            if chapter is None or chapter.comic_id != comic_id:
                logfire.warn(
                    "Progress for chapter outside comic",
                    comic_id=str(comic_id),
                    chapter_id=str(chapter_id),
                )
                raise ValueError("Chapter does not belong to this comic")

            now = utcnow()
            progress = ReadingProgress(
                id=ReadingProgressId(uuid4()),
                user_id=user_id,
                comic_id=comic_id,
                chapter_id=chapter_id,
                page_number=page_number,
                scroll_position=scroll_position,
                progress_percent=progress_percent,
                completed_at=now if progress_percent >= 100 else None,
                last_read_at=now,
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.reading_progress_repository.upsert(progress)
            except IntegrityError as e:
                logfire.error(
                    "Reading progress upsert failed",
                    user_id=str(user_id),
                    comic_id=str(comic_id),
                    error=str(e),
                )
                raise ValueError("Failed to save reading progress")

            logfire.info(
                "Reading progress saved",
                user_id=str(user_id),
                comic_id=str(comic_id),
                progress_percent=saved.progress_percent,
            )
            return saved

    async def get_progress(
        self, user_id: UserId, comic_id: ComicId
    ) -> ReadingProgress | None:
        """Get a user's progress in a comic, None if never opened."""
        with logfire.span(
            "reading_progress_service.get_progress",
            user_id=str(user_id),
            comic_id=str(comic_id),
        ):
            return await self.reading_progress_repository.find(user_id, comic_id)

    async def list_progress(self, user_id: UserId) -> list[ReadingProgress]:
        """A user's progress across comics, most recently read first."""
        with logfire.span(
            "reading_progress_service.list_progress", user_id=str(user_id)
        ):
            rows = await self.reading_progress_repository.find_by_user(user_id)
            logfire.info("Reading progress listed", user_id=str(user_id), count=len(rows))
            return rows

    async def delete_progress(self, user_id: UserId, comic_id: ComicId) -> bool:
        """Forget a user's progress in a comic.

        Returns:
            True if progress was deleted, False if none existed
        """
        with logfire.span(
            "reading_progress_service.delete_progress",
            user_id=str(user_id),
            comic_id=str(comic_id),
        ):
            deleted = await self.reading_progress_repository.delete(user_id, comic_id)
            if deleted:
                logfire.info(
                    "Reading progress deleted",
                    user_id=str(user_id),
                    comic_id=str(comic_id),
                )
            return deleted
