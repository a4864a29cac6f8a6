"""Add bookmark use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.domain.model import Bookmark
from inkwell.domain.service import BookmarkService
from inkwell.domain.value import BookmarkStatus, ComicId, UserId


class BookmarkResponse(BaseModel):
    """A bookmark without comic details."""

    comic_id: str
    status: BookmarkStatus
    notes: str | None
    last_read_chapter_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_bookmark(cls, bookmark: Bookmark) -> "BookmarkResponse":
        return cls(
            comic_id=str(bookmark.comic_id),
            status=bookmark.status,
            notes=bookmark.notes,
            last_read_chapter_id=(
                str(bookmark.last_read_chapter_id)
                if bookmark.last_read_chapter_id is not None
                else None
            ),
            created_at=bookmark.created_at,
            updated_at=bookmark.updated_at,
        )


class AddBookmarkRequest(BaseModel):
    """Add bookmark request."""

    user_id: str
    comic_id: str
    status: BookmarkStatus = BookmarkStatus.READING
    notes: str | None = Field(default=None, max_length=1000)


class AddBookmarkUseCase:
    """Use case for saving a comic to the user's library."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        self.bookmark_service = bookmark_service

    async def execute(self, request: AddBookmarkRequest) -> BookmarkResponse:
        """Execute add bookmark flow.

        Raises:
            NotFoundError: If the comic doesn't exist
            ValueError: If the comic is already bookmarked
        """
        bookmark = await self.bookmark_service.add_bookmark(
            user_id=UserId(UUID(request.user_id)),
            comic_id=ComicId(UUID(request.comic_id)),
            status=request.status,
            notes=request.notes,
        )
        return BookmarkResponse.from_bookmark(bookmark)
