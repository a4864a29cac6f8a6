"""Get reading progress use cases."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import NotFoundError
from inkwell.domain.service import ComicService, ReadingProgressService
from inkwell.domain.value import ComicId, UserId

from .save_progress import ProgressItem


class GetProgressRequest(BaseModel):
    """Get progress in one comic."""

    user_id: str
    comic_id: str


class GetProgressUseCase:
    """Use case for resuming a comic where the user left off."""

    def __init__(self, reading_progress_service: ReadingProgressService) -> None:
        self.reading_progress_service = reading_progress_service

    async def execute(self, request: GetProgressRequest) -> ProgressItem:
        """Execute get progress flow.

        Raises:
            NotFoundError: If the user never opened the comic
        """
        progress = await self.reading_progress_service.get_progress(
            UserId(UUID(request.user_id)), ComicId(UUID(request.comic_id))
        )
        if progress is None:
            raise NotFoundError("ReadingProgress", request.comic_id)
        return ProgressItem.from_progress(progress)


class ContinueReadingItem(ProgressItem):
    """Progress entry with the comic details for a "continue reading" shelf."""

    comic_title: str
    comic_slug: str
    cover_image: str


class ListProgressRequest(BaseModel):
    """List progress request."""

    user_id: str


class ListProgressResponse(BaseModel):
    """List progress response, most recently read first."""

    items: list[ContinueReadingItem]


class ListProgressUseCase:
    """Use case for the "continue reading" shelf."""

    def __init__(
        self,
        reading_progress_service: ReadingProgressService,
        comic_service: ComicService,
    ) -> None:
        self.reading_progress_service = reading_progress_service
        self.comic_service = comic_service

    async def execute(self, request: ListProgressRequest) -> ListProgressResponse:
        rows = await self.reading_progress_service.list_progress(
            UserId(UUID(request.user_id))
        )
        comics = await self.comic_service.get_by_ids([row.comic_id for row in rows])

        items = []
        for row in rows:
            comic = comics.get(row.comic_id)
            if comic is None:
                continue
            items.append(
                ContinueReadingItem(
                    **ProgressItem.from_progress(row).model_dump(),
                    comic_title=comic.title,
                    comic_slug=comic.slug.root,
                    cover_image=comic.cover_image,
                )
            )
        return ListProgressResponse(items=items)
