"""PostgreSQL implementation of ReadingProgress repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import ReadingProgress
from inkwell.domain.repository import ReadingProgressRepository
from inkwell.domain.value import ComicId, UserId
from inkwell.persistence.mappers import (
    reading_progress_to_dict,
    row_to_reading_progress,
)
from inkwell.persistence.tables import reading_progress_table


class PostgresReadingProgressRepository(ReadingProgressRepository):
    """PostgreSQL implementation of ReadingProgressRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self, user_id: UserId, comic_id: ComicId
    ) -> Optional[ReadingProgress]:
        """Find a user's progress in a comic."""
        stmt = select(reading_progress_table).where(
            and_(
                reading_progress_table.c.user_id == user_id,
                reading_progress_table.c.comic_id == comic_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reading_progress(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[ReadingProgress]:
        """List a user's progress, most recently read first."""
        stmt = (
            select(reading_progress_table)
            .where(reading_progress_table.c.user_id == user_id)
            .order_by(desc(reading_progress_table.c.last_read_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_reading_progress(row._asdict()) for row in result.fetchall()]

    async def upsert(self, progress: ReadingProgress) -> ReadingProgress:
        """INSERT ... ON CONFLICT (user_id, comic_id) DO UPDATE."""
        stmt = insert(reading_progress_table).values(
            **reading_progress_to_dict(progress)
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[
                reading_progress_table.c.user_id,
                reading_progress_table.c.comic_id,
            ],
            set_={
                "chapter_id": stmt.excluded.chapter_id,
                "page_number": stmt.excluded.page_number,
                "scroll_position": stmt.excluded.scroll_position,
                "progress_percent": stmt.excluded.progress_percent,
                # First completion wins
                "completed_at": func.coalesce(
                    reading_progress_table.c.completed_at, stmt.excluded.completed_at
                ),
                "last_read_at": stmt.excluded.last_read_at,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(reading_progress_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_reading_progress(row._asdict())

    async def delete(self, user_id: UserId, comic_id: ComicId) -> bool:
        """Delete a user's progress in a comic."""
        stmt = delete(reading_progress_table).where(
            and_(
                reading_progress_table.c.user_id == user_id,
                reading_progress_table.c.comic_id == comic_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
