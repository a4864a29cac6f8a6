"""Bookmark entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import BookmarkStatus, ChapterId, ComicId, UserId


class Bookmark(DomainModel):
    """A comic saved to a user's library.

    Identified by the (user_id, comic_id) pair; a user bookmarks a comic at
    most once.
    """

    user_id: UserId
    comic_id: ComicId
    status: BookmarkStatus = BookmarkStatus.READING
    notes: Optional[str] = Field(default=None, max_length=1000)
    last_read_chapter_id: Optional[ChapterId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
