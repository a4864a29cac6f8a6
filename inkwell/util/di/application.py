"""Application layer DI providers.

Use cases are built from their constructor signatures; every dependency is a
domain service or settings object already known to the container.
"""

from dishka import Scope, provide

from inkwell.application.usecase.admin import (
    CreateAuthorUseCase,
    CreateChapterUseCase,
    CreateComicUseCase,
    CreateGenreUseCase,
    DeleteAuthorUseCase,
    DeleteChapterUseCase,
    DeleteComicUseCase,
    DeleteGenreUseCase,
    UpdateAuthorUseCase,
    UpdateComicUseCase,
    UpdateGenreUseCase,
)
from inkwell.application.usecase.auth import (
    GetCurrentUserUseCase,
    SignInUseCase,
    SignUpUseCase,
)
from inkwell.application.usecase.bookmark import (
    AddBookmarkUseCase,
    GetBookmarkStatusUseCase,
    ListBookmarksUseCase,
    RemoveBookmarkUseCase,
    UpdateBookmarkUseCase,
)
from inkwell.application.usecase.catalog import ListAuthorsUseCase, ListGenresUseCase
from inkwell.application.usecase.comic import (
    GetComicUseCase,
    ListComicsUseCase,
    ReadChapterUseCase,
)
from inkwell.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from inkwell.application.usecase.progress import (
    DeleteProgressUseCase,
    GetProgressUseCase,
    ListProgressUseCase,
    SaveProgressUseCase,
)
from inkwell.application.usecase.rating import (
    DeleteRatingUseCase,
    GetRatingUseCase,
    RateComicUseCase,
)
from inkwell.application.usecase.user import (
    ChangePasswordUseCase,
    UpdateUserProfileUseCase,
)
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    sign_up = provide(SignUpUseCase)
    sign_in = provide(SignInUseCase)
    get_current_user = provide(GetCurrentUserUseCase)

    # User use cases
    update_user_profile = provide(UpdateUserProfileUseCase)
    change_password = provide(ChangePasswordUseCase)

    # Reading use cases
    list_comics = provide(ListComicsUseCase)
    get_comic = provide(GetComicUseCase)
    read_chapter = provide(ReadChapterUseCase)
    list_genres = provide(ListGenresUseCase)
    list_authors = provide(ListAuthorsUseCase)

    # Comment use cases
    create_comment = provide(CreateCommentUseCase)
    get_comments = provide(GetCommentsUseCase)
    update_comment = provide(UpdateCommentUseCase)
    delete_comment = provide(DeleteCommentUseCase)

    # Library use cases
    add_bookmark = provide(AddBookmarkUseCase)
    update_bookmark = provide(UpdateBookmarkUseCase)
    remove_bookmark = provide(RemoveBookmarkUseCase)
    list_bookmarks = provide(ListBookmarksUseCase)
    get_bookmark_status = provide(GetBookmarkStatusUseCase)
    rate_comic = provide(RateComicUseCase)
    get_rating = provide(GetRatingUseCase)
    delete_rating = provide(DeleteRatingUseCase)
    save_progress = provide(SaveProgressUseCase)
    get_progress = provide(GetProgressUseCase)
    list_progress = provide(ListProgressUseCase)
    delete_progress = provide(DeleteProgressUseCase)

    # Admin use cases
    create_comic = provide(CreateComicUseCase)
    update_comic = provide(UpdateComicUseCase)
    delete_comic = provide(DeleteComicUseCase)
    create_chapter = provide(CreateChapterUseCase)
    delete_chapter = provide(DeleteChapterUseCase)
    create_author = provide(CreateAuthorUseCase)
    update_author = provide(UpdateAuthorUseCase)
    delete_author = provide(DeleteAuthorUseCase)
    create_genre = provide(CreateGenreUseCase)
    update_genre = provide(UpdateGenreUseCase)
    delete_genre = provide(DeleteGenreUseCase)
