"""PostgreSQL implementation of Comic repository."""

from collections import defaultdict
from typing import List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import asc, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Comic
from inkwell.domain.repository import ComicRepository, ComicSortOrder
from inkwell.domain.value import ComicId, ComicStatus, GenreId, Slug
from inkwell.persistence.mappers import comic_to_dict, row_to_comic
from inkwell.persistence.tables import comic_genres_table, comics_table


class PostgresComicRepository(ComicRepository):
    """PostgreSQL implementation of ComicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_genres_for_comics(
        self, comic_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch genre IDs for multiple comics in a single query.

        Args:
            comic_ids: List of comic IDs

        Returns:
            Dict mapping comic_id -> list of genre IDs
        """
        if not comic_ids:
            return {}

        stmt = select(comic_genres_table.c.comic_id, comic_genres_table.c.genre_id).where(
            comic_genres_table.c.comic_id.in_(comic_ids)
        )
        result = await self.session.execute(stmt)

        comic_genre_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            comic_genre_map[row.comic_id].append(row.genre_id)

        return comic_genre_map

    async def _rows_to_comics(self, rows) -> List[Comic]:
        comic_genre_map = await self._fetch_genres_for_comics([row.id for row in rows])
        return [
            row_to_comic(row._asdict(), genre_ids=comic_genre_map.get(row.id, []))
            for row in rows
        ]

    def _apply_filters(
        self,
        stmt,
        search: Optional[str],
        genre_id: Optional[GenreId],
        status: Optional[ComicStatus],
    ):
        if search:
            stmt = stmt.where(comics_table.c.title.ilike(f"%{search}%"))
        if genre_id:
            stmt = stmt.where(
                comics_table.c.id.in_(
                    select(comic_genres_table.c.comic_id).where(
                        comic_genres_table.c.genre_id == genre_id
                    )
                )
            )
        if status:
            stmt = stmt.where(comics_table.c.status == status.value)
        return stmt

    async def find_by_id(self, comic_id: ComicId) -> Optional[Comic]:
        """Find a comic by ID."""
        stmt = select(comics_table).where(comics_table.c.id == comic_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        return (await self._rows_to_comics([row]))[0]

    async def find_by_slug(self, slug: Slug) -> Optional[Comic]:
        """Find a comic by slug."""
        with logfire.span("comic_repository.find_by_slug", slug=slug.root):
            stmt = select(comics_table).where(comics_table.c.slug == slug.root)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if not row:
                return None
            return (await self._rows_to_comics([row]))[0]

    async def find_by_ids(self, comic_ids: Sequence[ComicId]) -> List[Comic]:
        """Find comics by IDs (batch query)."""
        if not comic_ids:
            return []
        stmt = select(comics_table).where(comics_table.c.id.in_(comic_ids))
        result = await self.session.execute(stmt)
        return await self._rows_to_comics(result.fetchall())

    async def find_all(
        self,
        search: Optional[str] = None,
        genre_id: Optional[GenreId] = None,
        status: Optional[ComicStatus] = None,
        sort: ComicSortOrder = ComicSortOrder.LATEST,
        limit: int = 12,
        offset: int = 0,
    ) -> List[Comic]:
        """Find comics with filtering and pagination."""
        with logfire.span(
            "comic_repository.find_all",
            search=search,
            genre_id=str(genre_id) if genre_id else None,
            status=status.value if status else None,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filters(select(comics_table), search, genre_id, status)

            # Sort order, id as tiebreaker for stable pagination
            if sort == ComicSortOrder.LATEST:
                stmt = stmt.order_by(desc(comics_table.c.updated_at))
            elif sort == ComicSortOrder.POPULAR:
                stmt = stmt.order_by(desc(comics_table.c.views))
            elif sort == ComicSortOrder.RATING:
                stmt = stmt.order_by(desc(comics_table.c.rating))
            elif sort == ComicSortOrder.TITLE:
                stmt = stmt.order_by(asc(comics_table.c.title))
            stmt = stmt.order_by(comics_table.c.id)

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            rows = result.fetchall()
            comics = await self._rows_to_comics(rows)
            logfire.info("Found comics", count=len(comics))
            return comics

    async def count(
        self,
        search: Optional[str] = None,
        genre_id: Optional[GenreId] = None,
        status: Optional[ComicStatus] = None,
    ) -> int:
        """Count comics matching filters."""
        stmt = self._apply_filters(
            select(func.count()).select_from(comics_table), search, genre_id, status
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comic: Comic) -> Comic:
        """Save a comic and replace its genre links."""
        with logfire.span("comic_repository.save", comic_id=str(comic.id)):
            existing = await self.find_by_id(comic.id)
            comic_dict = comic_to_dict(comic)

            if existing:
                stmt = (
                    update(comics_table)
                    .where(comics_table.c.id == comic.id)
                    .values(**comic_dict)
                )
                await self.session.execute(stmt)
                await self.session.execute(
                    delete(comic_genres_table).where(
                        comic_genres_table.c.comic_id == comic.id
                    )
                )
            else:
                await self.session.execute(insert(comics_table).values(**comic_dict))

            if comic.genre_ids:
                await self.session.execute(
                    insert(comic_genres_table),
                    [
                        {"comic_id": comic.id, "genre_id": genre_id}
                        for genre_id in comic.genre_ids
                    ],
                )

            await self.session.flush()
            return comic

    async def delete(self, comic_id: ComicId) -> bool:
        """Delete a comic; dependent rows cascade."""
        stmt = delete(comics_table).where(comics_table.c.id == comic_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def increment_views(self, comic_id: ComicId) -> None:
        """Atomically increment views by 1."""
        stmt = (
            update(comics_table)
            .where(comics_table.c.id == comic_id)
            .values(views=comics_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def update_rating(self, comic_id: ComicId, rating: float) -> None:
        """Store the denormalized average rating."""
        stmt = (
            update(comics_table)
            .where(comics_table.c.id == comic_id)
            .values(rating=rating)
        )
        await self.session.execute(stmt)
        await self.session.flush()
