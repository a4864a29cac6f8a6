"""PostgreSQL implementation of Chapter repository."""

from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Chapter
from inkwell.domain.repository import ChapterRepository
from inkwell.domain.value import ChapterId, ComicId
from inkwell.persistence.mappers import chapter_to_dict, row_to_chapter
from inkwell.persistence.tables import chapters_table


class PostgresChapterRepository(ChapterRepository):
    """PostgreSQL implementation of ChapterRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, chapter_id: ChapterId) -> Optional[Chapter]:
        """Find a chapter by ID."""
        stmt = select(chapters_table).where(chapters_table.c.id == chapter_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_chapter(row._asdict()) if row else None

    async def find_by_comic_and_number(
        self, comic_id: ComicId, chapter_number: int
    ) -> Optional[Chapter]:
        """Find a chapter by its number within a comic."""
        stmt = select(chapters_table).where(
            chapters_table.c.comic_id == comic_id,
            chapters_table.c.chapter_number == chapter_number,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_chapter(row._asdict()) if row else None

    async def find_by_comic(self, comic_id: ComicId) -> List[Chapter]:
        """List chapters of a comic by chapter number."""
        stmt = (
            select(chapters_table)
            .where(chapters_table.c.comic_id == comic_id)
            .order_by(chapters_table.c.chapter_number)
        )
        result = await self.session.execute(stmt)
        return [row_to_chapter(row._asdict()) for row in result.fetchall()]

    async def save(self, chapter: Chapter) -> Chapter:
        """Save a chapter (create or update)."""
        existing = await self.find_by_id(chapter.id)
        chapter_dict = chapter_to_dict(chapter)

        if existing:
            stmt = (
                chapters_table.update()
                .where(chapters_table.c.id == chapter.id)
                .values(**chapter_dict)
            )
        else:
            stmt = chapters_table.insert().values(**chapter_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return chapter

    async def delete(self, chapter_id: ChapterId) -> bool:
        """Delete a chapter; its comments cascade."""
        stmt = delete(chapters_table).where(chapters_table.c.id == chapter_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def increment_views(self, chapter_id: ChapterId) -> None:
        """Atomically increment views by 1."""
        stmt = (
            update(chapters_table)
            .where(chapters_table.c.id == chapter_id)
            .values(views=chapters_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
