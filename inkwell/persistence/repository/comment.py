"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Comment, CommentRecord
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import ChapterId, CommentId
from inkwell.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    row_to_comment_record,
)
from inkwell.persistence.tables import comments_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_records_by_chapter(self, chapter_id: ChapterId) -> List[CommentRecord]:
        """Fetch a chapter's comments with author fields, in creation order.

        Outer join so comments of deleted users are kept.
        """
        stmt = (
            select(
                comments_table,
                users_table.c.name.label("author_name"),
                users_table.c.email.label("author_email"),
                users_table.c.image.label("author_image"),
            )
            .select_from(comments_table)
            .outerjoin(users_table, comments_table.c.author_id == users_table.c.id)
            .where(comments_table.c.chapter_id == chapter_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_record(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(content=content, updated_at=utcnow())
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Set deleted_at on a live comment."""
        now = utcnow()
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def count_by_chapter(self, chapter_id: ChapterId) -> int:
        """Count comments for a chapter (excluding deleted)."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.chapter_id == chapter_id)
            .where(comments_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
