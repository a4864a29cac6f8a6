"""Bookmark domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from inkwell.domain.error import AlreadyExistsError, NotFoundError
from inkwell.domain.model import Bookmark
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import BookmarkRepository
from inkwell.domain.value import BookmarkStatus, ChapterId, ComicId, UserId

from .base import Service
from .comic_service import ComicService


class BookmarkService(Service):
    """Domain service for a user's comic library."""

    def __init__(
        self, bookmark_repository: BookmarkRepository, comic_service: ComicService
    ) -> None:
        """Initialize bookmark service.

        Args:
            bookmark_repository: Bookmark repository
            comic_service: Comic domain service
        """
        self.bookmark_repository = bookmark_repository
        self.comic_service = comic_service

    async def add_bookmark(
        self,
        user_id: UserId,
        comic_id: ComicId,
        status: BookmarkStatus = BookmarkStatus.READING,
        notes: str | None = None,
    ) -> Bookmark:
        """Bookmark a comic.

        Args:
            user_id: User ID
            comic_id: Comic ID
            status: Reading list to file the comic under
            notes: Optional private notes

        Returns:
            Created bookmark

        Raises:
            NotFoundError: If the comic doesn't exist
            AlreadyExistsError: If the comic is already bookmarked
        """
        with logfire.span(
            "bookmark_service.add_bookmark",
            user_id=str(user_id),
            comic_id=str(comic_id),
            status=status.value,
        ):
            comic = await self.comic_service.get_by_id(comic_id)
            if comic is None:
                raise NotFoundError("Comic", str(comic_id))

            existing = await self.bookmark_repository.find(user_id, comic_id)
            if existing:
                logfire.warn(
                    "Duplicate bookmark attempt",
                    user_id=str(user_id),
                    comic_id=str(comic_id),
                )
                raise AlreadyExistsError("Bookmark", str(comic_id))

            now = utcnow()
            bookmark = Bookmark(
                user_id=user_id,
                comic_id=comic_id,
                status=status,
                notes=notes,
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.bookmark_repository.save(bookmark)
            except IntegrityError:
                logfire.warn(
                    "Duplicate bookmark on insert",
                    user_id=str(user_id),
                    comic_id=str(comic_id),
                )
                raise AlreadyExistsError("Bookmark", str(comic_id))

            logfire.info(
                "Bookmark added", user_id=str(user_id), comic_id=str(comic_id)
            )
            return saved

    async def update_bookmark(
        self,
        user_id: UserId,
        comic_id: ComicId,
        status: BookmarkStatus | None = None,
        notes: str | None = None,
        last_read_chapter_id: ChapterId | None = None,
    ) -> Bookmark:
        """Update a bookmark. Fields left as None are unchanged.

        Raises:
            NotFoundError: If the comic isn't bookmarked
        """
        with logfire.span(
            "bookmark_service.update_bookmark",
            user_id=str(user_id),
            comic_id=str(comic_id),
        ):
            bookmark = await self.bookmark_repository.find(user_id, comic_id)
            if bookmark is None:
                raise NotFoundError("Bookmark", str(comic_id))

            updates: dict = {"updated_at": utcnow()}
            if status is not None:
                updates["status"] = status
            if notes is not None:
                updates["notes"] = notes
            if last_read_chapter_id is not None:
                updates["last_read_chapter_id"] = last_read_chapter_id

            updated = Bookmark.model_validate({**bookmark.model_dump(), **updates})
            saved = await self.bookmark_repository.update(updated)
            if saved is None:
                raise NotFoundError("Bookmark", str(comic_id))

            logfire.info(
                "Bookmark updated",
                user_id=str(user_id),
                comic_id=str(comic_id),
                fields=sorted(k for k in updates if k != "updated_at"),
            )
            return saved

    async def remove_bookmark(self, user_id: UserId, comic_id: ComicId) -> None:
        """Remove a bookmark.

        Raises:
            NotFoundError: If the comic isn't bookmarked
        """
        with logfire.span(
            "bookmark_service.remove_bookmark",
            user_id=str(user_id),
            comic_id=str(comic_id),
        ):
            deleted = await self.bookmark_repository.delete(user_id, comic_id)
            if not deleted:
                raise NotFoundError("Bookmark", str(comic_id))
            logfire.info(
                "Bookmark removed", user_id=str(user_id), comic_id=str(comic_id)
            )

    async def list_bookmarks(self, user_id: UserId) -> list[Bookmark]:
        """List a user's bookmarks, newest first."""
        with logfire.span("bookmark_service.list_bookmarks", user_id=str(user_id)):
            bookmarks = await self.bookmark_repository.find_by_user(user_id)
            logfire.info(
                "Bookmarks listed", user_id=str(user_id), count=len(bookmarks)
            )
            return bookmarks

    async def get_bookmark(
        self, user_id: UserId, comic_id: ComicId
    ) -> Bookmark | None:
        return await self.bookmark_repository.find(user_id, comic_id)
