"""Save reading progress use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.domain.model import ReadingProgress
from inkwell.domain.service import ReadingProgressService
from inkwell.domain.value import ChapterId, ComicId, UserId


class ProgressItem(BaseModel):
    """Reading position in one comic."""

    comic_id: str
    chapter_id: str
    page_number: int
    scroll_position: int
    progress_percent: int
    completed_at: datetime | None
    last_read_at: datetime

    @classmethod
    def from_progress(cls, progress: ReadingProgress) -> "ProgressItem":
        return cls(
            comic_id=str(progress.comic_id),
            chapter_id=str(progress.chapter_id),
            page_number=progress.page_number,
            scroll_position=progress.scroll_position,
            progress_percent=progress.progress_percent,
            completed_at=progress.completed_at,
            last_read_at=progress.last_read_at,
        )


class SaveProgressRequest(BaseModel):
    """Save reading progress request."""

    user_id: str
    comic_id: str
    chapter_id: str
    page_number: int = Field(default=0, ge=0)
    scroll_position: int = Field(default=0, ge=0, le=100)
    progress_percent: int = Field(default=0, ge=0, le=100)


class SaveProgressUseCase:
    """Use case for syncing the reader's position."""

    def __init__(self, reading_progress_service: ReadingProgressService) -> None:
        self.reading_progress_service = reading_progress_service

    async def execute(self, request: SaveProgressRequest) -> ProgressItem:
        """Execute save progress flow.

        Raises:
            ValueError: If the chapter doesn't belong to the comic
        """
        progress = await self.reading_progress_service.save_progress(
            user_id=UserId(UUID(request.user_id)),
            comic_id=ComicId(UUID(request.comic_id)),
            chapter_id=ChapterId(UUID(request.chapter_id)),
            page_number=request.page_number,
            scroll_position=request.scroll_position,
            progress_percent=request.progress_percent,
        )
        return ProgressItem.from_progress(progress)
