"""Comic reading use cases."""

from .get_comic import GetComicRequest, GetComicResponse, GetComicUseCase
from .list_comics import (
    ComicListItem,
    ListComicsRequest,
    ListComicsResponse,
    ListComicsUseCase,
)
from .read_chapter import ReadChapterRequest, ReadChapterResponse, ReadChapterUseCase

__all__ = [
    "ComicListItem",
    "GetComicRequest",
    "GetComicResponse",
    "GetComicUseCase",
    "ListComicsRequest",
    "ListComicsResponse",
    "ListComicsUseCase",
    "ReadChapterRequest",
    "ReadChapterResponse",
    "ReadChapterUseCase",
]
