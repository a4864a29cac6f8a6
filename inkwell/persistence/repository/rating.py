"""PostgreSQL implementation of Rating repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Rating, RatingStats
from inkwell.domain.repository import RatingRepository
from inkwell.domain.value import ComicId, UserId
from inkwell.persistence.mappers import rating_to_dict, row_to_rating
from inkwell.persistence.tables import ratings_table


class PostgresRatingRepository(RatingRepository):
    """PostgreSQL implementation of RatingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_comic(
        self, user_id: UserId, comic_id: ComicId
    ) -> Optional[Rating]:
        """Find a user's rating of a comic."""
        stmt = select(ratings_table).where(
            and_(
                ratings_table.c.user_id == user_id,
                ratings_table.c.comic_id == comic_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_rating(row._asdict()) if row else None

    async def upsert(self, rating: Rating) -> Rating:
        """Insert a rating, or overwrite stars and review on conflict."""
        stmt = insert(ratings_table).values(**rating_to_dict(rating))
        stmt = stmt.on_conflict_do_update(
            index_elements=[ratings_table.c.user_id, ratings_table.c.comic_id],
            set_={
                "rating": stmt.excluded.rating,
                "review": stmt.excluded.review,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(ratings_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_rating(row._asdict())

    async def delete(self, user_id: UserId, comic_id: ComicId) -> bool:
        """Delete a user's rating of a comic."""
        stmt = delete(ratings_table).where(
            and_(
                ratings_table.c.user_id == user_id,
                ratings_table.c.comic_id == comic_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def get_stats(self, comic_id: ComicId) -> RatingStats:
        """Average and count of a comic's ratings."""
        stmt = select(
            func.avg(ratings_table.c.rating).label("average"),
            func.count(ratings_table.c.id).label("total"),
        ).where(ratings_table.c.comic_id == comic_id)
        result = await self.session.execute(stmt)
        row = result.one()

        if not row.total:
            return RatingStats()
        return RatingStats(
            average_rating=round(float(row.average), 1), total_ratings=row.total
        )
