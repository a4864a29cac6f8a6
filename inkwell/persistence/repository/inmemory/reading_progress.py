"""In-memory reading progress repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.reading_progress import ReadingProgress
from inkwell.domain.repository.reading_progress import ReadingProgressRepository
from inkwell.domain.value import ComicId, UserId

from .store import InMemoryStore


class InMemoryReadingProgressRepository(ReadingProgressRepository):
    """In-memory implementation of ReadingProgressRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find(
        self, user_id: UserId, comic_id: ComicId
    ) -> Optional[ReadingProgress]:
        """Find a user's progress in a comic."""
        return self._store.progress.get((user_id, comic_id))

    async def find_by_user(self, user_id: UserId) -> list[ReadingProgress]:
        """List a user's progress, most recently read first."""
        return sorted(
            (p for p in self._store.progress.values() if p.user_id == user_id),
            key=lambda p: p.last_read_at,
            reverse=True,
        )

    async def upsert(self, progress: ReadingProgress) -> ReadingProgress:
        """Insert or overwrite progress with the same semantics as the SQL upsert.

        Raises:
            IntegrityError: If the comic or chapter doesn't exist
        """
        if (
            progress.comic_id not in self._store.comics
            or progress.chapter_id not in self._store.chapters
        ):
            raise IntegrityError("Unknown comic or chapter", None, Exception())

        key = (progress.user_id, progress.comic_id)
        existing = self._store.progress.get(key)
        if existing:
            progress = progress.model_copy(
                update={
                    "id": existing.id,
                    "created_at": existing.created_at,
                    "completed_at": existing.completed_at or progress.completed_at,
                }
            )
        self._store.progress[key] = progress
        return progress

    async def delete(self, user_id: UserId, comic_id: ComicId) -> bool:
        """Delete a user's progress in a comic."""
        return self._store.progress.pop((user_id, comic_id), None) is not None
