"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from inkwell.domain.model.comment import COMMENT_MAX_LENGTH, trim_comment_content
from inkwell.domain.service import CommentService
from inkwell.domain.value import ChapterId, CommentId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    chapter_id: str  # UUID string
    content: str = Field(min_length=1, max_length=COMMENT_MAX_LENGTH)
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies

    @field_validator("content", mode="before")
    @classmethod
    def trim_content(cls, v: object) -> object:
        return trim_comment_content(v)


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    chapter_id: str
    author_id: str
    content: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime


class CreateCommentUseCase:
    """Use case for commenting on a chapter or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            NotFoundError: If the chapter doesn't exist
            ValueError: If the parent comment is invalid or the content is blank
        """
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None
        comment = await self.comment_service.create_comment(
            chapter_id=ChapterId(UUID(request.chapter_id)),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            parent_id=parent_id,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            chapter_id=str(comment.chapter_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id is not None else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
