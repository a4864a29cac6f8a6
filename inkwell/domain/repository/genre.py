"""Genre repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from inkwell.domain.model.genre import Genre
from inkwell.domain.value import GenreId, Slug


class GenreRepository(ABC):
    """Repository for Genre entity."""

    @abstractmethod
    async def find_by_id(self, genre_id: GenreId) -> Optional[Genre]:
        """Find a genre by ID."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Genre]:
        """Find a genre by slug."""
        pass

    @abstractmethod
    async def find_by_ids(self, genre_ids: Sequence[GenreId]) -> List[Genre]:
        """Find genres by IDs, ordered by name. Unknown IDs are skipped."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Genre]:
        """List all genres ordered by name."""
        pass

    @abstractmethod
    async def save(self, genre: Genre) -> Genre:
        """Save a genre (create or update).

        Raises:
            IntegrityError: If the name or slug is already taken
        """
        pass

    @abstractmethod
    async def delete(self, genre_id: GenreId) -> bool:
        """Delete a genre and detach it from all comics.

        Returns:
            True if a genre was deleted, False if none matched
        """
        pass
