"""Reading progress entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import ChapterId, ComicId, ReadingProgressId, UserId


class ReadingProgress(DomainModel):
    """Where a user left off in a comic.

    There is exactly one row per (user_id, comic_id); saving progress
    overwrites the chapter and position. ``completed_at`` is set the first
    time the comic reaches 100% and is then preserved.
    """

    id: ReadingProgressId
    user_id: UserId
    comic_id: ComicId
    chapter_id: ChapterId
    page_number: int = Field(default=0, ge=0)
    scroll_position: int = Field(default=0, ge=0, le=100)
    progress_percent: int = Field(default=0, ge=0, le=100)
    completed_at: Optional[datetime] = None
    last_read_at: datetime = Field(default_factory=utcnow)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
