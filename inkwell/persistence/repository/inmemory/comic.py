"""In-memory comic repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.comic import Comic
from inkwell.domain.repository.comic import ComicRepository, ComicSortOrder
from inkwell.domain.value import ComicId, ComicStatus, GenreId, Slug

from .store import InMemoryStore


class InMemoryComicRepository(ComicRepository):
    """In-memory implementation of ComicRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _filter(
        self,
        search: Optional[str],
        genre_id: Optional[GenreId],
        status: Optional[ComicStatus],
    ) -> list[Comic]:
        comics = list(self._store.comics.values())
        if search:
            comics = [c for c in comics if search.lower() in c.title.lower()]
        if genre_id:
            comics = [c for c in comics if genre_id in c.genre_ids]
        if status:
            comics = [c for c in comics if c.status == status]
        return comics

    async def find_by_id(self, comic_id: ComicId) -> Optional[Comic]:
        """Find a comic by ID."""
        return self._store.comics.get(comic_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Comic]:
        """Find a comic by slug."""
        for comic in self._store.comics.values():
            if comic.slug == slug:
                return comic
        return None

    async def find_by_ids(self, comic_ids: Sequence[ComicId]) -> list[Comic]:
        """Find comics by IDs."""
        return [self._store.comics[c] for c in comic_ids if c in self._store.comics]

    async def find_all(
        self,
        search: Optional[str] = None,
        genre_id: Optional[GenreId] = None,
        status: Optional[ComicStatus] = None,
        sort: ComicSortOrder = ComicSortOrder.LATEST,
        limit: int = 12,
        offset: int = 0,
    ) -> list[Comic]:
        """Find comics with filtering and pagination."""
        comics = sorted(self._filter(search, genre_id, status), key=lambda c: str(c.id))

        if sort == ComicSortOrder.LATEST:
            comics.sort(key=lambda c: c.updated_at, reverse=True)
        elif sort == ComicSortOrder.POPULAR:
            comics.sort(key=lambda c: c.views, reverse=True)
        elif sort == ComicSortOrder.RATING:
            comics.sort(key=lambda c: c.rating, reverse=True)
        elif sort == ComicSortOrder.TITLE:
            comics.sort(key=lambda c: c.title)

        return comics[offset : offset + limit]

    async def count(
        self,
        search: Optional[str] = None,
        genre_id: Optional[GenreId] = None,
        status: Optional[ComicStatus] = None,
    ) -> int:
        """Count comics matching filters."""
        return len(self._filter(search, genre_id, status))

    async def save(self, comic: Comic) -> Comic:
        """Save a comic.

        Raises:
            IntegrityError: If the title or slug is taken by another comic
        """
        for other in self._store.comics.values():
            if other.id != comic.id and (
                other.title == comic.title or other.slug == comic.slug
            ):
                raise IntegrityError("Duplicate comic", None, Exception())
        self._store.comics[comic.id] = comic
        return comic

    async def delete(self, comic_id: ComicId) -> bool:
        """Delete a comic and everything hanging off it."""
        if self._store.comics.pop(comic_id, None) is None:
            return False

        chapter_ids = {
            c.id for c in self._store.chapters.values() if c.comic_id == comic_id
        }
        for chapter_id in chapter_ids:
            del self._store.chapters[chapter_id]
        self._store.comments = {
            k: v
            for k, v in self._store.comments.items()
            if v.chapter_id not in chapter_ids
        }
        for table in (self._store.bookmarks, self._store.ratings, self._store.progress):
            for key in [k for k in table if k[1] == comic_id]:
                del table[key]
        return True

    async def increment_views(self, comic_id: ComicId) -> None:
        """Increment views by 1."""
        comic = self._store.comics.get(comic_id)
        if comic:
            self._store.comics[comic_id] = comic.model_copy(
                update={"views": comic.views + 1}
            )

    async def update_rating(self, comic_id: ComicId, rating: float) -> None:
        """Store the denormalized average rating."""
        comic = self._store.comics.get(comic_id)
        if comic:
            self._store.comics[comic_id] = comic.model_copy(update={"rating": rating})
