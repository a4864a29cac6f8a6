"""Read chapter use case."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.domain.error import NotFoundError
from inkwell.domain.service import ChapterService, ComicService, CommentService
from inkwell.domain.value import Slug


class ReadChapterRequest(BaseModel):
    """Read chapter request."""

    comic_slug: str
    chapter_number: int


class ReadChapterResponse(BaseModel):
    """Chapter reader payload."""

    chapter_id: str
    comic_id: str
    comic_title: str
    comic_slug: str
    chapter_number: int
    title: str
    release_date: datetime
    image_urls: list[str]
    views: int
    previous_chapter: int | None
    next_chapter: int | None
    comment_count: int


class ReadChapterUseCase:
    """Use case for opening a chapter in the reader."""

    def __init__(
        self,
        comic_service: ComicService,
        chapter_service: ChapterService,
        comment_service: CommentService,
    ) -> None:
        self.comic_service = comic_service
        self.chapter_service = chapter_service
        self.comment_service = comment_service

    async def execute(self, request: ReadChapterRequest) -> ReadChapterResponse:
        """Execute read chapter flow.

        Raises:
            NotFoundError: If the comic or chapter doesn't exist
        """
        try:
            slug = Slug(request.comic_slug)
        except ValueError:
            raise NotFoundError("Comic", request.comic_slug)

        comic = await self.comic_service.get_by_slug(slug)
        if comic is None:
            raise NotFoundError("Comic", request.comic_slug)

        chapter = await self.chapter_service.get_by_number(
            comic.id, request.chapter_number
        )
        if chapter is None:
            raise NotFoundError(
                "Chapter", f"{request.comic_slug}#{request.chapter_number}"
            )

        await self.chapter_service.increment_views(chapter.id)
        previous_chapter, next_chapter = await self.chapter_service.get_neighbours(
            chapter
        )
        comment_count = await self.comment_service.count_comments(chapter.id)

        return ReadChapterResponse(
            chapter_id=str(chapter.id),
            comic_id=str(comic.id),
            comic_title=comic.title,
            comic_slug=comic.slug.root,
            chapter_number=chapter.chapter_number,
            title=chapter.title,
            release_date=chapter.release_date,
            image_urls=chapter.image_urls,
            views=chapter.views + 1,
            previous_chapter=previous_chapter,
            next_chapter=next_chapter,
            comment_count=comment_count,
        )
