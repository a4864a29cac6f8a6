"""Admin chapter management use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.domain.error import NotFoundError
from inkwell.domain.model import Chapter
from inkwell.domain.service import ChapterService, ComicService, UserService
from inkwell.domain.value import ChapterId, ComicId, Slug

from .base import AdminUseCase


class AdminChapterResponse(BaseModel):
    """Chapter as seen by the back office."""

    chapter_id: str
    comic_id: str
    chapter_number: int
    title: str
    slug: str
    release_date: datetime
    image_urls: list[str]
    views: int
    created_at: datetime

    @classmethod
    def from_chapter(cls, chapter: Chapter) -> "AdminChapterResponse":
        return cls(
            chapter_id=str(chapter.id),
            comic_id=str(chapter.comic_id),
            chapter_number=chapter.chapter_number,
            title=chapter.title,
            slug=chapter.slug.root,
            release_date=chapter.release_date,
            image_urls=chapter.image_urls,
            views=chapter.views,
            created_at=chapter.created_at,
        )


class CreateChapterRequest(BaseModel):
    """Create chapter request."""

    user_id: str
    comic_id: str
    chapter_number: int = Field(ge=0)
    title: str = Field(min_length=1, max_length=300)
    slug: str | None = None
    release_date: datetime | None = None
    image_urls: list[str] = Field(default_factory=list)


class DeleteChapterRequest(BaseModel):
    """Delete chapter request."""

    user_id: str
    chapter_id: str


class CreateChapterUseCase(AdminUseCase):
    """Use case for publishing a chapter of a comic."""

    def __init__(
        self,
        user_service: UserService,
        comic_service: ComicService,
        chapter_service: ChapterService,
    ) -> None:
        super().__init__(user_service)
        self.comic_service = comic_service
        self.chapter_service = chapter_service

    async def execute(self, request: CreateChapterRequest) -> AdminChapterResponse:
        """Execute create chapter flow.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
            NotFoundError: If the comic doesn't exist
            AlreadyExistsError: If the chapter number is taken
        """
        await self.require_admin(request.user_id)

        comic_id = ComicId(UUID(request.comic_id))
        if await self.comic_service.get_by_id(comic_id) is None:
            raise NotFoundError("Comic", request.comic_id)

        chapter = await self.chapter_service.create_chapter(
            comic_id=comic_id,
            chapter_number=request.chapter_number,
            title=request.title,
            image_urls=request.image_urls,
            slug=Slug(request.slug) if request.slug else None,
            release_date=request.release_date,
        )
        return AdminChapterResponse.from_chapter(chapter)


class DeleteChapterUseCase(AdminUseCase):
    """Use case for removing a chapter and its discussion."""

    def __init__(
        self, user_service: UserService, chapter_service: ChapterService
    ) -> None:
        super().__init__(user_service)
        self.chapter_service = chapter_service

    async def execute(self, request: DeleteChapterRequest) -> None:
        await self.require_admin(request.user_id)
        await self.chapter_service.delete_chapter(ChapterId(UUID(request.chapter_id)))
