"""Remove bookmark use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.service import BookmarkService
from inkwell.domain.value import ComicId, UserId


class RemoveBookmarkRequest(BaseModel):
    """Remove bookmark request."""

    user_id: str
    comic_id: str


class RemoveBookmarkUseCase:
    """Use case for removing a comic from the user's library."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        self.bookmark_service = bookmark_service

    async def execute(self, request: RemoveBookmarkRequest) -> None:
        """Execute remove bookmark flow.

        Raises:
            NotFoundError: If the comic isn't bookmarked
        """
        await self.bookmark_service.remove_bookmark(
            UserId(UUID(request.user_id)), ComicId(UUID(request.comic_id))
        )
