"""PostgreSQL implementation of Genre repository."""

from typing import List, Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Genre
from inkwell.domain.repository import GenreRepository
from inkwell.domain.value import GenreId, Slug
from inkwell.persistence.mappers import genre_to_dict, row_to_genre
from inkwell.persistence.tables import genres_table


class PostgresGenreRepository(GenreRepository):
    """PostgreSQL implementation of GenreRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, genre_id: GenreId) -> Optional[Genre]:
        """Find a genre by ID."""
        stmt = select(genres_table).where(genres_table.c.id == genre_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_genre(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Genre]:
        """Find a genre by slug."""
        stmt = select(genres_table).where(genres_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_genre(row._asdict()) if row else None

    async def find_by_ids(self, genre_ids: Sequence[GenreId]) -> List[Genre]:
        """Find genres by IDs (batch query)."""
        if not genre_ids:
            return []

        stmt = (
            select(genres_table)
            .where(genres_table.c.id.in_(genre_ids))
            .order_by(genres_table.c.name)
        )
        result = await self.session.execute(stmt)
        return [row_to_genre(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> List[Genre]:
        """List all genres ordered by name."""
        stmt = select(genres_table).order_by(genres_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_genre(row._asdict()) for row in result.fetchall()]

    async def save(self, genre: Genre) -> Genre:
        """Save a genre (create or update)."""
        existing = await self.find_by_id(genre.id)
        genre_dict = genre_to_dict(genre)

        if existing:
            stmt = (
                genres_table.update()
                .where(genres_table.c.id == genre.id)
                .values(**genre_dict)
            )
        else:
            stmt = genres_table.insert().values(**genre_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return genre

    async def delete(self, genre_id: GenreId) -> bool:
        """Delete a genre; junction rows cascade."""
        stmt = delete(genres_table).where(genres_table.c.id == genre_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
