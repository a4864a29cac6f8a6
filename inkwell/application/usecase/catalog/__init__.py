"""Catalog reference data use cases."""

from .list_authors import AuthorItem, ListAuthorsResponse, ListAuthorsUseCase
from .list_genres import GenreItem, ListGenresResponse, ListGenresUseCase

__all__ = [
    "AuthorItem",
    "GenreItem",
    "ListAuthorsResponse",
    "ListAuthorsUseCase",
    "ListGenresResponse",
    "ListGenresUseCase",
]
