"""In-memory chapter repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.chapter import Chapter
from inkwell.domain.repository.chapter import ChapterRepository
from inkwell.domain.value import ChapterId, ComicId

from .store import InMemoryStore


class InMemoryChapterRepository(ChapterRepository):
    """In-memory implementation of ChapterRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, chapter_id: ChapterId) -> Optional[Chapter]:
        """Find a chapter by ID."""
        return self._store.chapters.get(chapter_id)

    async def find_by_comic_and_number(
        self, comic_id: ComicId, chapter_number: int
    ) -> Optional[Chapter]:
        """Find a chapter by number within a comic."""
        for chapter in self._store.chapters.values():
            if chapter.comic_id == comic_id and chapter.chapter_number == chapter_number:
                return chapter
        return None

    async def find_by_comic(self, comic_id: ComicId) -> list[Chapter]:
        """List chapters of a comic by chapter number."""
        return sorted(
            (c for c in self._store.chapters.values() if c.comic_id == comic_id),
            key=lambda c: c.chapter_number,
        )

    async def save(self, chapter: Chapter) -> Chapter:
        """Save a chapter.

        Raises:
            IntegrityError: If the comic doesn't exist or already has a
                chapter with this number
        """
        if chapter.comic_id not in self._store.comics:
            raise IntegrityError("Unknown comic", None, Exception())
        for other in self._store.chapters.values():
            if (
                other.id != chapter.id
                and other.comic_id == chapter.comic_id
                and other.chapter_number == chapter.chapter_number
            ):
                raise IntegrityError("Duplicate chapter number", None, Exception())
        self._store.chapters[chapter.id] = chapter
        return chapter

    async def delete(self, chapter_id: ChapterId) -> bool:
        """Delete a chapter and its comments."""
        if self._store.chapters.pop(chapter_id, None) is None:
            return False
        self._store.comments = {
            k: v for k, v in self._store.comments.items() if v.chapter_id != chapter_id
        }
        return True

    async def increment_views(self, chapter_id: ChapterId) -> None:
        """Increment views by 1."""
        chapter = self._store.chapters.get(chapter_id)
        if chapter:
            self._store.chapters[chapter_id] = chapter.model_copy(
                update={"views": chapter.views + 1}
            )
