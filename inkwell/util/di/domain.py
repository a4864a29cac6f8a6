"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import AuthSettings
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
from inkwell.domain.service import (
    AuthorService,
    AuthService,
    BookmarkService,
    ChapterService,
    ComicService,
    CommentService,
    GenreService,
    JWTService,
    RatingService,
    ReadingProgressService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide password authentication domain service."""
        return AuthService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_author_service(self, author_repository: AuthorRepository) -> AuthorService:
        return AuthorService(author_repository=author_repository)

    @provide
    def get_genre_service(self, genre_repository: GenreRepository) -> GenreService:
        return GenreService(genre_repository=genre_repository)

    @provide
    def get_comic_service(self, comic_repository: ComicRepository) -> ComicService:
        """Provide comic domain service."""
        return ComicService(comic_repository=comic_repository)

    @provide
    def get_chapter_service(
        self, chapter_repository: ChapterRepository
    ) -> ChapterService:
        """Provide chapter domain service."""
        return ChapterService(chapter_repository=chapter_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        chapter_service: ChapterService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, chapter_service=chapter_service
        )

    @provide
    def get_rating_service(
        self, rating_repository: RatingRepository, comic_service: ComicService
    ) -> RatingService:
        """Provide rating domain service."""
        return RatingService(
            rating_repository=rating_repository, comic_service=comic_service
        )

    @provide
    def get_bookmark_service(
        self, bookmark_repository: BookmarkRepository, comic_service: ComicService
    ) -> BookmarkService:
        """Provide bookmark domain service."""
        return BookmarkService(
            bookmark_repository=bookmark_repository, comic_service=comic_service
        )

    @provide
    def get_reading_progress_service(
        self,
        reading_progress_repository: ReadingProgressRepository,
        chapter_service: ChapterService,
    ) -> ReadingProgressService:
        """Provide reading progress domain service."""
        return ReadingProgressService(
            reading_progress_repository=reading_progress_repository,
            chapter_service=chapter_service,
        )
