"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.domain.error import ContentDeletedException, NotAuthorizedError, NotFoundError
from inkwell.domain.service import CommentService, UserService
from inkwell.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # Author or an admin


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment. Replies stay visible."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is neither the author nor an admin
            ContentDeletedException: If the comment is already deleted
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        if comment.author_id != user_id:
            user = await self.user_service.get_by_id(user_id)
            if not user.is_admin:
                raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        if comment.is_deleted:
            raise ContentDeletedException("comment", request.comment_id)

        deleted = await self.comment_service.soft_delete(comment_id)
        if deleted is None:
            raise ContentDeletedException("comment", request.comment_id)
