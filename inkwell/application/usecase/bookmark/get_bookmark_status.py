"""Bookmark status use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.service import BookmarkService
from inkwell.domain.value import BookmarkStatus, ComicId, UserId


class GetBookmarkStatusRequest(BaseModel):
    """Bookmark status request."""

    user_id: str
    comic_id: str


class GetBookmarkStatusResponse(BaseModel):
    """Whether a comic is in the user's library, and in which list."""

    comic_id: str
    is_bookmarked: bool
    status: BookmarkStatus | None


class GetBookmarkStatusUseCase:
    """Use case for the bookmark toggle on a comic page."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        self.bookmark_service = bookmark_service

    async def execute(
        self, request: GetBookmarkStatusRequest
    ) -> GetBookmarkStatusResponse:
        bookmark = await self.bookmark_service.get_bookmark(
            UserId(UUID(request.user_id)), ComicId(UUID(request.comic_id))
        )
        return GetBookmarkStatusResponse(
            comic_id=request.comic_id,
            is_bookmarked=bookmark is not None,
            status=bookmark.status if bookmark is not None else None,
        )
