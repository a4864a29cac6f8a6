"""PostgreSQL implementation of Bookmark repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Bookmark
from inkwell.domain.repository import BookmarkRepository
from inkwell.domain.value import ComicId, UserId
from inkwell.persistence.mappers import bookmark_to_dict, row_to_bookmark
from inkwell.persistence.tables import bookmarks_table


class PostgresBookmarkRepository(BookmarkRepository):
    """PostgreSQL implementation of BookmarkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _key(self, user_id: UserId, comic_id: ComicId):
        return and_(
            bookmarks_table.c.user_id == user_id,
            bookmarks_table.c.comic_id == comic_id,
        )

    async def find(self, user_id: UserId, comic_id: ComicId) -> Optional[Bookmark]:
        """Find a user's bookmark of a comic."""
        stmt = select(bookmarks_table).where(self._key(user_id, comic_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_bookmark(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[Bookmark]:
        """List a user's bookmarks, newest first."""
        stmt = (
            select(bookmarks_table)
            .where(bookmarks_table.c.user_id == user_id)
            .order_by(desc(bookmarks_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_bookmark(row._asdict()) for row in result.fetchall()]

    async def save(self, bookmark: Bookmark) -> Bookmark:
        """Create a bookmark (raises IntegrityError on duplicate key)."""
        stmt = insert(bookmarks_table).values(**bookmark_to_dict(bookmark))
        await self.session.execute(stmt)
        await self.session.flush()
        return bookmark

    async def update(self, bookmark: Bookmark) -> Optional[Bookmark]:
        """Overwrite the mutable fields of a bookmark."""
        stmt = (
            update(bookmarks_table)
            .where(self._key(bookmark.user_id, bookmark.comic_id))
            .values(
                status=bookmark.status.value,
                notes=bookmark.notes,
                last_read_chapter_id=bookmark.last_read_chapter_id,
                updated_at=bookmark.updated_at,
            )
            .returning(bookmarks_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_bookmark(row._asdict())

    async def delete(self, user_id: UserId, comic_id: ComicId) -> bool:
        """Delete a bookmark."""
        stmt = delete(bookmarks_table).where(self._key(user_id, comic_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
