"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field, field_validator

from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from inkwell.domain.model.comment import COMMENT_MAX_LENGTH, trim_comment_content
from inkwell.domain.service import JWTService
from inkwell.interface.api.auth import require_user_id
from inkwell.interface.error import to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=COMMENT_MAX_LENGTH)
    parent_id: str | None = None  # Parent comment ID for replies

    @field_validator("content", mode="before")
    @classmethod
    def trim_content(cls, v: object) -> object:
        return trim_comment_content(v)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=COMMENT_MAX_LENGTH)

    @field_validator("content", mode="before")
    @classmethod
    def trim_content(cls, v: object) -> object:
        return trim_comment_content(v)


@router.get("/chapters/{chapter_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    chapter_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get a chapter's discussion as a tree.

    Top-level comments come first in posting order, each with its replies
    nested under ``replies``. Deleted comments keep their place so replies
    to them stay visible, with content replaced by a placeholder.

    Example:
        GET /chapters/6f1c.../comments

        Response:
        {
            "chapter_id": "6f1c...",
            "total": 3,
            "roots": [
                {
                    "comment_id": "...",
                    "content": "[deleted]",
                    "is_deleted": true,
                    "replies": [{"comment_id": "...", "content": "Agreed", ...}]
                },
                ...
            ]
        }
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(chapter_id=chapter_id)
        )
    except Exception as e:
        raise to_http_exception(e, "get comments")


@router.post(
    "/chapters/{chapter_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    chapter_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a chapter or reply to another comment.

    Requires authentication.

    Raises:
        HTTPException: 401 if not signed in, 404 if the chapter doesn't exist,
            400 if the parent comment is invalid
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                chapter_id=chapter_id,
                content=request.content,
                author_id=user_id,
                parent_id=request.parent_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create comment")


@router.patch("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Edit a comment. Only the author can edit, and not once deleted."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id, user_id=user_id, content=request.content
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update comment")


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Soft-delete a comment. Allowed for the author and for admins."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete comment")
