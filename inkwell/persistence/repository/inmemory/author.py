"""In-memory author repository for testing."""

from typing import Optional

from inkwell.domain.model.author import Author
from inkwell.domain.repository.author import AuthorRepository
from inkwell.domain.value import AuthorId

from .store import InMemoryStore


class InMemoryAuthorRepository(AuthorRepository):
    """In-memory implementation of AuthorRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, author_id: AuthorId) -> Optional[Author]:
        return self._store.authors.get(author_id)

    async def find_all(self) -> list[Author]:
        return sorted(self._store.authors.values(), key=lambda a: a.name)

    async def save(self, author: Author) -> Author:
        self._store.authors[author.id] = author
        return author

    async def delete(self, author_id: AuthorId) -> bool:
        if self._store.authors.pop(author_id, None) is None:
            return False
        # ON DELETE SET NULL
        for comic_id, comic in list(self._store.comics.items()):
            if comic.author_id == author_id:
                self._store.comics[comic_id] = comic.model_copy(
                    update={"author_id": None}
                )
        return True
