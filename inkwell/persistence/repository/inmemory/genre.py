"""In-memory genre repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.genre import Genre
from inkwell.domain.repository.genre import GenreRepository
from inkwell.domain.value import GenreId, Slug

from .store import InMemoryStore


class InMemoryGenreRepository(GenreRepository):
    """In-memory implementation of GenreRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, genre_id: GenreId) -> Optional[Genre]:
        """Find a genre by ID."""
        return self._store.genres.get(genre_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Genre]:
        """Find a genre by slug."""
        for genre in self._store.genres.values():
            if genre.slug == slug:
                return genre
        return None

    async def find_by_ids(self, genre_ids: Sequence[GenreId]) -> list[Genre]:
        """Find genres by IDs, ordered by name."""
        wanted = set(genre_ids)
        return sorted(
            (g for g in self._store.genres.values() if g.id in wanted),
            key=lambda g: g.name,
        )

    async def find_all(self) -> list[Genre]:
        """List all genres ordered by name."""
        return sorted(self._store.genres.values(), key=lambda g: g.name)

    async def save(self, genre: Genre) -> Genre:
        """Save a genre.

        Raises:
            IntegrityError: If the name or slug is taken by another genre
        """
        for other in self._store.genres.values():
            if other.id != genre.id and (
                other.name == genre.name or other.slug == genre.slug
            ):
                raise IntegrityError("Duplicate genre", None, Exception())
        self._store.genres[genre.id] = genre
        return genre

    async def delete(self, genre_id: GenreId) -> bool:
        """Delete a genre and unlink it from comics."""
        if self._store.genres.pop(genre_id, None) is None:
            return False
        for comic_id, comic in list(self._store.comics.items()):
            if genre_id in comic.genre_ids:
                self._store.comics[comic_id] = comic.model_copy(
                    update={"genre_ids": [g for g in comic.genre_ids if g != genre_id]}
                )
        return True
