"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from inkwell.config import Settings
from inkwell.domain.repository import (
    AuthorRepository,
    BookmarkRepository,
    ChapterRepository,
    ComicRepository,
    CommentRepository,
    GenreRepository,
    RatingRepository,
    ReadingProgressRepository,
    UserRepository,
)
from inkwell.persistence.database import create_engine, create_session_factory
from inkwell.persistence.repository import (
    PostgresAuthorRepository,
    PostgresBookmarkRepository,
    PostgresChapterRepository,
    PostgresComicRepository,
    PostgresCommentRepository,
    PostgresGenreRepository,
    PostgresRatingRepository,
    PostgresReadingProgressRepository,
    PostgresUserRepository,
)
from inkwell.util.di.base import ProviderBase
from inkwell.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_author_repository(self, session: AsyncSession) -> AuthorRepository:
        return PostgresAuthorRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_genre_repository(self, session: AsyncSession) -> GenreRepository:
        return PostgresGenreRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comic_repository(self, session: AsyncSession) -> ComicRepository:
        """Provide Comic repository."""
        return PostgresComicRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_chapter_repository(self, session: AsyncSession) -> ChapterRepository:
        """Provide Chapter repository."""
        return PostgresChapterRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_bookmark_repository(self, session: AsyncSession) -> BookmarkRepository:
        return PostgresBookmarkRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_rating_repository(self, session: AsyncSession) -> RatingRepository:
        return PostgresRatingRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reading_progress_repository(
        self, session: AsyncSession
    ) -> ReadingProgressRepository:
        return PostgresReadingProgressRepository(session)
