"""Back-office catalog management use cases."""

from .authors import (
    CreateAuthorRequest,
    CreateAuthorUseCase,
    DeleteAuthorRequest,
    DeleteAuthorUseCase,
    UpdateAuthorRequest,
    UpdateAuthorUseCase,
)
from .base import AdminUseCase
from .chapters import (
    AdminChapterResponse,
    CreateChapterRequest,
    CreateChapterUseCase,
    DeleteChapterRequest,
    DeleteChapterUseCase,
)
from .comics import (
    AdminComicResponse,
    CreateComicRequest,
    CreateComicUseCase,
    DeleteComicRequest,
    DeleteComicUseCase,
    UpdateComicRequest,
    UpdateComicUseCase,
)
from .genres import (
    CreateGenreRequest,
    CreateGenreUseCase,
    DeleteGenreRequest,
    DeleteGenreUseCase,
    UpdateGenreRequest,
    UpdateGenreUseCase,
)

__all__ = [
    "AdminChapterResponse",
    "AdminComicResponse",
    "AdminUseCase",
    "CreateAuthorRequest",
    "CreateAuthorUseCase",
    "CreateChapterRequest",
    "CreateChapterUseCase",
    "CreateComicRequest",
    "CreateComicUseCase",
    "CreateGenreRequest",
    "CreateGenreUseCase",
    "DeleteAuthorRequest",
    "DeleteAuthorUseCase",
    "DeleteChapterRequest",
    "DeleteChapterUseCase",
    "DeleteComicRequest",
    "DeleteComicUseCase",
    "DeleteGenreRequest",
    "DeleteGenreUseCase",
    "UpdateAuthorRequest",
    "UpdateAuthorUseCase",
    "UpdateComicRequest",
    "UpdateComicUseCase",
    "UpdateGenreRequest",
    "UpdateGenreUseCase",
]
