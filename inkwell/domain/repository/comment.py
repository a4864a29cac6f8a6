"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from inkwell.domain.model.comment import Comment, CommentRecord
from inkwell.domain.value import ChapterId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Soft-deleted comments are returned too; callers check ``is_deleted``.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_records_by_chapter(self, chapter_id: ChapterId) -> List[CommentRecord]:
        """Fetch the flat comment records of one chapter.

        Every comment of the chapter is returned, soft-deleted ones included,
        ordered by created_at ascending with id as tiebreaker. Author display
        name and avatar are resolved by joining users; a missing author falls
        back to "Unknown User" with no avatar.

        Args:
            chapter_id: The chapter (discussion context) ID

        Returns:
            Flat list of comment records in creation order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a live comment and bump updated_at.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            The updated comment, None if it doesn't exist or is deleted
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Mark a comment deleted by setting deleted_at.

        The row is kept so replies stay attached to it.

        Args:
            comment_id: The comment ID

        Returns:
            The deleted comment, None if it doesn't exist or was already deleted
        """
        pass

    @abstractmethod
    async def count_by_chapter(self, chapter_id: ChapterId) -> int:
        """Count live (not deleted) comments of a chapter."""
        pass
