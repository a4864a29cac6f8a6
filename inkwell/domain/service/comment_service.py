"""Comment domain service."""

from uuid import uuid4

import logfire

from inkwell.domain.error import NotFoundError
from inkwell.domain.model.comment import Comment, CommentRecord
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import ChapterId, CommentId, UserId

from .base import Service
from .chapter_service import ChapterService
from .comment_tree import CommentNode, build_comment_tree


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        chapter_service: ChapterService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            chapter_service: Chapter domain service
        """
        self.comment_repository = comment_repository
        self.chapter_service = chapter_service

    async def create_comment(
        self,
        chapter_id: ChapterId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a chapter or reply to another comment.

        Args:
            chapter_id: Chapter ID
            author_id: Author user ID
            content: Comment content
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the chapter doesn't exist
            ValueError: If the parent comment is invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            chapter_id=str(chapter_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id is not None else None,
        ):
            chapter = await self.chapter_service.get_by_id(chapter_id)
            if chapter is None:
                raise NotFoundError("Chapter", str(chapter_id))

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        chapter_id=str(chapter_id),
                    )
                    raise ValueError("Parent comment not found")
                if parent.chapter_id != chapter_id:
                    logfire.error(
                        "Parent comment does not belong to chapter",
                        parent_id=str(parent_id),
                        parent_chapter_id=str(parent.chapter_id),
                        target_chapter_id=str(chapter_id),
                    )
                    raise ValueError("Parent comment does not belong to this chapter")
                if parent.is_deleted:
                    logfire.warn("Reply to deleted comment", parent_id=str(parent_id))
                    raise ValueError("Cannot reply to a deleted comment")

            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                chapter_id=chapter_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                chapter_id=str(chapter_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found (deleted or not), None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment_records(self, chapter_id: ChapterId) -> list[CommentRecord]:
        """Fetch a chapter's comments as flat records in creation order.

        Soft-deleted comments are included so their replies keep an anchor.

        Args:
            chapter_id: Chapter ID

        Returns:
            Flat records ordered by created_at ascending
        """
        with logfire.span(
            "comment_service.get_comment_records", chapter_id=str(chapter_id)
        ):
            records = await self.comment_repository.find_records_by_chapter(chapter_id)
            logfire.info(
                "Comment records retrieved",
                chapter_id=str(chapter_id),
                count=len(records),
            )
            return records

    async def get_comment_thread(self, chapter_id: ChapterId) -> list[CommentNode]:
        """Get a chapter's discussion as a forest of comment nodes.

        Args:
            chapter_id: Chapter ID

        Returns:
            Root comments (top-level and orphaned) with replies nested
        """
        with logfire.span(
            "comment_service.get_comment_thread", chapter_id=str(chapter_id)
        ):
            records = await self.get_comment_records(chapter_id)
            roots = build_comment_tree(records)
            logfire.info(
                "Comment thread built",
                chapter_id=str(chapter_id),
                roots=len(roots),
                total=len(records),
            )
            return roots

    async def count_comments(self, chapter_id: ChapterId) -> int:
        """Count live comments of a chapter."""
        with logfire.span("comment_service.count_comments", chapter_id=str(chapter_id)):
            return await self.comment_repository.count_by_chapter(chapter_id)

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Comment | None:
        """Update the content of a comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment, None if the comment doesn't exist or is deleted
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            updated = await self.comment_repository.update_content(comment_id, content)
            if updated:
                logfire.info("Comment content updated", comment_id=str(comment_id))
            else:
                logfire.warn(
                    "Comment not found or deleted for content update",
                    comment_id=str(comment_id),
                )
            return updated

    async def soft_delete(self, comment_id: CommentId) -> Comment | None:
        """Soft-delete a comment; its replies stay in place.

        Args:
            comment_id: Comment ID

        Returns:
            Deleted comment, None if it doesn't exist or was already deleted
        """
        with logfire.span("comment_service.soft_delete", comment_id=str(comment_id)):
            deleted = await self.comment_repository.soft_delete(comment_id)
            if deleted:
                logfire.info("Comment soft-deleted", comment_id=str(comment_id))
            else:
                logfire.warn(
                    "Comment not found or already deleted", comment_id=str(comment_id)
                )
            return deleted
