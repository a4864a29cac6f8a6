"""Mock persistence providers for testing."""

from dishka import Scope, provide

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
from inkwell.persistence.repository.inmemory import (
    InMemoryAuthorRepository,
    InMemoryBookmarkRepository,
    InMemoryChapterRepository,
    InMemoryComicRepository,
    InMemoryCommentRepository,
    InMemoryGenreRepository,
    InMemoryRatingRepository,
    InMemoryReadingProgressRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from inkwell.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives at APP scope, so every request served by one container
    sees the same rows (an e2e test can sign up in one request and comment in
    the next). Each container gets a fresh store, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_author_repository(self, store: InMemoryStore) -> AuthorRepository:
        return InMemoryAuthorRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_genre_repository(self, store: InMemoryStore) -> GenreRepository:
        return InMemoryGenreRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comic_repository(self, store: InMemoryStore) -> ComicRepository:
        """Provide in-memory comic repository."""
        return InMemoryComicRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_chapter_repository(self, store: InMemoryStore) -> ChapterRepository:
        """Provide in-memory chapter repository."""
        return InMemoryChapterRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_bookmark_repository(self, store: InMemoryStore) -> BookmarkRepository:
        return InMemoryBookmarkRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_rating_repository(self, store: InMemoryStore) -> RatingRepository:
        return InMemoryRatingRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_reading_progress_repository(
        self, store: InMemoryStore
    ) -> ReadingProgressRepository:
        return InMemoryReadingProgressRepository(store)
