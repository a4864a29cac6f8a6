"""Update comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from inkwell.domain.error import ContentDeletedException, NotAuthorizedError, NotFoundError
from inkwell.domain.model.comment import COMMENT_MAX_LENGTH, trim_comment_content
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str = Field(min_length=1, max_length=COMMENT_MAX_LENGTH)

    @field_validator("content", mode="before")
    @classmethod
    def trim_content(cls, v: object) -> object:
        return trim_comment_content(v)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment_id: str
    chapter_id: str
    author_id: str
    content: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
            ContentDeletedException: If the comment is deleted
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        if comment.author_id != user_id:
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        if comment.is_deleted:
            raise ContentDeletedException("comment", request.comment_id)

        updated = await self.comment_service.update_content(
            comment_id, request.content
        )
        # Deleted between the check and the update
        if updated is None:
            raise ContentDeletedException("comment", request.comment_id)

        return UpdateCommentResponse(
            comment_id=str(updated.id),
            chapter_id=str(updated.chapter_id),
            author_id=str(updated.author_id),
            content=updated.content,
            parent_id=str(updated.parent_id) if updated.parent_id is not None else None,
            created_at=updated.created_at,
            updated_at=updated.updated_at,
        )
