"""Delete reading progress use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import NotFoundError
from inkwell.domain.service import ReadingProgressService
from inkwell.domain.value import ComicId, UserId


class DeleteProgressRequest(BaseModel):
    """Delete progress request."""

    user_id: str
    comic_id: str


class DeleteProgressUseCase:
    """Use case for removing a comic from the "continue reading" shelf."""

    def __init__(self, reading_progress_service: ReadingProgressService) -> None:
        self.reading_progress_service = reading_progress_service

    async def execute(self, request: DeleteProgressRequest) -> None:
        deleted = await self.reading_progress_service.delete_progress(
            UserId(UUID(request.user_id)), ComicId(UUID(request.comic_id))
        )
        if not deleted:
            raise NotFoundError("ReadingProgress", request.comic_id)
