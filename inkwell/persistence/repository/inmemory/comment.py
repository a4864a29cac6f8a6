"""In-memory comment repository for testing."""

from typing import Optional

from inkwell.domain.model.comment import UNKNOWN_AUTHOR_NAME, Comment, CommentRecord
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.value import ChapterId, CommentId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_records_by_chapter(self, chapter_id: ChapterId) -> list[CommentRecord]:
        """Flat records of a chapter, creation order, authors resolved."""
        comments = sorted(
            (c for c in self._store.comments.values() if c.chapter_id == chapter_id),
            key=lambda c: (c.created_at, str(c.id)),
        )

        records = []
        for comment in comments:
            author = self._store.users.get(comment.author_id)
            records.append(
                CommentRecord(
                    id=comment.id,
                    chapter_id=comment.chapter_id,
                    author_id=comment.author_id,
                    author_display_name=(
                        author.display_name if author else UNKNOWN_AUTHOR_NAME
                    ),
                    author_avatar_url=author.image if author else None,
                    content=comment.content,
                    parent_id=comment.parent_id,
                    created_at=comment.created_at,
                    updated_at=comment.updated_at,
                    deleted_at=comment.deleted_at,
                )
            )
        return records

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a live comment."""
        comment = self._store.comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None

        updated = Comment.model_validate(
            {**comment.model_dump(), "content": content, "updated_at": utcnow()}
        )
        self._store.comments[comment_id] = updated
        return updated

    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Set deleted_at on a live comment."""
        comment = self._store.comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None

        now = utcnow()
        deleted = comment.model_copy(update={"deleted_at": now, "updated_at": now})
        self._store.comments[comment_id] = deleted
        return deleted

    async def count_by_chapter(self, chapter_id: ChapterId) -> int:
        """Count live comments of a chapter."""
        return sum(
            1
            for c in self._store.comments.values()
            if c.chapter_id == chapter_id and not c.is_deleted
        )
