"""In-memory bookmark repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.bookmark import Bookmark
from inkwell.domain.repository.bookmark import BookmarkRepository
from inkwell.domain.value import ComicId, UserId

from .store import InMemoryStore


class InMemoryBookmarkRepository(BookmarkRepository):
    """In-memory implementation of BookmarkRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find(self, user_id: UserId, comic_id: ComicId) -> Optional[Bookmark]:
        return self._store.bookmarks.get((user_id, comic_id))

    async def find_by_user(self, user_id: UserId) -> list[Bookmark]:
        return sorted(
            (b for b in self._store.bookmarks.values() if b.user_id == user_id),
            key=lambda b: b.created_at,
            reverse=True,
        )

    async def save(self, bookmark: Bookmark) -> Bookmark:
        """Create a bookmark.

        Raises:
            IntegrityError: If the bookmark already exists
        """
        key = (bookmark.user_id, bookmark.comic_id)
        if key in self._store.bookmarks:
            raise IntegrityError("Duplicate bookmark", None, Exception())
        self._store.bookmarks[key] = bookmark
        return bookmark

    async def update(self, bookmark: Bookmark) -> Optional[Bookmark]:
        key = (bookmark.user_id, bookmark.comic_id)
        existing = self._store.bookmarks.get(key)
        if existing is None:
            return None
        updated = existing.model_copy(
            update={
                "status": bookmark.status,
                "notes": bookmark.notes,
                "last_read_chapter_id": bookmark.last_read_chapter_id,
                "updated_at": bookmark.updated_at,
            }
        )
        self._store.bookmarks[key] = updated
        return updated

    async def delete(self, user_id: UserId, comic_id: ComicId) -> bool:
        return self._store.bookmarks.pop((user_id, comic_id), None) is not None
