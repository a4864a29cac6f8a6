"""List bookmarks use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.service import BookmarkService, ComicService
from inkwell.domain.value import BookmarkStatus, UserId


class BookmarkItem(BaseModel):
    """Bookmark with the comic details needed to render the library."""

    comic_id: str
    comic_title: str
    comic_slug: str
    cover_image: str
    status: BookmarkStatus
    notes: str | None
    last_read_chapter_id: str | None
    created_at: datetime
    updated_at: datetime


class ListBookmarksRequest(BaseModel):
    """List bookmarks request."""

    user_id: str
    status: BookmarkStatus | None = None  # Only this list, when given


class ListBookmarksResponse(BaseModel):
    """List bookmarks response."""

    bookmarks: list[BookmarkItem]
    total: int


class ListBookmarksUseCase:
    """Use case for showing the user's library, newest first."""

    def __init__(
        self, bookmark_service: BookmarkService, comic_service: ComicService
    ) -> None:
        """Initialize list bookmarks use case.

        Args:
            bookmark_service: Bookmark domain service
            comic_service: Comic domain service for titles and covers
        """
        self.bookmark_service = bookmark_service
        self.comic_service = comic_service

    async def execute(self, request: ListBookmarksRequest) -> ListBookmarksResponse:
        bookmarks = await self.bookmark_service.list_bookmarks(
            UserId(UUID(request.user_id))
        )
        if request.status is not None:
            bookmarks = [b for b in bookmarks if b.status == request.status]

        comics = await self.comic_service.get_by_ids(
            list(dict.fromkeys(b.comic_id for b in bookmarks))
        )

        items = []
        for bookmark in bookmarks:
            comic = comics.get(bookmark.comic_id)
            # Comic deleted after the bookmark was listed
            if comic is None:
                continue
            items.append(
                BookmarkItem(
                    comic_id=str(comic.id),
                    comic_title=comic.title,
                    comic_slug=comic.slug.root,
                    cover_image=comic.cover_image,
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
            )

        return ListBookmarksResponse(bookmarks=items, total=len(items))
