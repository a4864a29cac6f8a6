"""Update bookmark use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.domain.service import BookmarkService
from inkwell.domain.value import BookmarkStatus, ChapterId, ComicId, UserId

from .add_bookmark import BookmarkResponse


class UpdateBookmarkRequest(BaseModel):
    """Update bookmark request. Fields left out are unchanged."""

    user_id: str
    comic_id: str
    status: BookmarkStatus | None = None
    notes: str | None = Field(default=None, max_length=1000)
    last_read_chapter_id: str | None = None


class UpdateBookmarkUseCase:
    """Use case for moving a bookmark between lists or editing its notes."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        self.bookmark_service = bookmark_service

    async def execute(self, request: UpdateBookmarkRequest) -> BookmarkResponse:
        """Execute update bookmark flow.

        Raises:
            NotFoundError: If the comic isn't bookmarked
        """
        bookmark = await self.bookmark_service.update_bookmark(
            user_id=UserId(UUID(request.user_id)),
            comic_id=ComicId(UUID(request.comic_id)),
            status=request.status,
            notes=request.notes,
            last_read_chapter_id=(
                ChapterId(UUID(request.last_read_chapter_id))
                if request.last_read_chapter_id
                else None
            ),
        )
        return BookmarkResponse.from_bookmark(bookmark)
