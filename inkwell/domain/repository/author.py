"""Author repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from inkwell.domain.model.author import Author
from inkwell.domain.value import AuthorId


class AuthorRepository(ABC):
    """Repository for Author entity."""

    @abstractmethod
    async def find_by_id(self, author_id: AuthorId) -> Optional[Author]:
        """Find an author by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Author]:
        """List all authors ordered by name."""
        pass

    @abstractmethod
    async def save(self, author: Author) -> Author:
        """Save an author (create or update)."""
        pass

    @abstractmethod
    async def delete(self, author_id: AuthorId) -> bool:
        """Delete an author.

        Comics credited to the author keep existing with no author.

        Returns:
            True if an author was deleted, False if none matched
        """
        pass
