"""PostgreSQL implementation of Author repository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Author
from inkwell.domain.repository import AuthorRepository
from inkwell.domain.value import AuthorId
from inkwell.persistence.mappers import author_to_dict, row_to_author
from inkwell.persistence.tables import authors_table


class PostgresAuthorRepository(AuthorRepository):
    """PostgreSQL implementation of AuthorRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, author_id: AuthorId) -> Optional[Author]:
        stmt = select(authors_table).where(authors_table.c.id == author_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_author(row._asdict()) if row else None

    async def find_all(self) -> List[Author]:
        stmt = select(authors_table).order_by(authors_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_author(row._asdict()) for row in result.fetchall()]

    async def save(self, author: Author) -> Author:
        existing = await self.find_by_id(author.id)
        author_dict = author_to_dict(author)

        if existing:
            stmt = (
                authors_table.update()
                .where(authors_table.c.id == author.id)
                .values(**author_dict)
            )
        else:
            stmt = authors_table.insert().values(**author_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return author

    async def delete(self, author_id: AuthorId) -> bool:
        stmt = delete(authors_table).where(authors_table.c.id == author_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
