"""Bookmark (library) routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.bookmark import (
    AddBookmarkRequest,
    AddBookmarkUseCase,
    BookmarkResponse,
    GetBookmarkStatusRequest,
    GetBookmarkStatusResponse,
    GetBookmarkStatusUseCase,
    ListBookmarksRequest,
    ListBookmarksResponse,
    ListBookmarksUseCase,
    RemoveBookmarkRequest,
    RemoveBookmarkUseCase,
    UpdateBookmarkRequest,
    UpdateBookmarkUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.domain.value import BookmarkStatus
from inkwell.interface.api.auth import require_user_id
from inkwell.interface.error import to_http_exception

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"], route_class=DishkaRoute)


class AddBookmarkAPIRequest(BaseModel):
    """API request for bookmarking a comic."""

    comic_id: str
    status: BookmarkStatus = BookmarkStatus.READING
    notes: str | None = Field(default=None, max_length=1000)


class UpdateBookmarkAPIRequest(BaseModel):
    """API request for updating a bookmark. Omitted fields are unchanged."""

    status: BookmarkStatus | None = None
    notes: str | None = Field(default=None, max_length=1000)
    last_read_chapter_id: str | None = None


@router.get("", response_model=ListBookmarksResponse)
async def list_bookmarks(
    list_bookmarks_use_case: FromDishka[ListBookmarksUseCase],
    jwt_service: FromDishka[JWTService],
    bookmark_status: BookmarkStatus | None = Query(default=None, alias="status"),
    auth_token: str | None = Cookie(default=None),
) -> ListBookmarksResponse:
    """The signed-in user's library, newest first, optionally one list only."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await list_bookmarks_use_case.execute(
            ListBookmarksRequest(user_id=user_id, status=bookmark_status)
        )
    except Exception as e:
        raise to_http_exception(e, "list bookmarks")


@router.post("", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
async def add_bookmark(
    request: AddBookmarkAPIRequest,
    add_bookmark_use_case: FromDishka[AddBookmarkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> BookmarkResponse:
    """Bookmark a comic.

    Raises:
        HTTPException: 404 if the comic doesn't exist, 409 if already bookmarked
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await add_bookmark_use_case.execute(
            AddBookmarkRequest(
                user_id=user_id,
                comic_id=request.comic_id,
                status=request.status,
                notes=request.notes,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "add bookmark")


@router.get("/{comic_id}", response_model=GetBookmarkStatusResponse)
async def get_bookmark_status(
    comic_id: str,
    get_bookmark_status_use_case: FromDishka[GetBookmarkStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetBookmarkStatusResponse:
    """Whether the comic is in the signed-in user's library."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await get_bookmark_status_use_case.execute(
            GetBookmarkStatusRequest(user_id=user_id, comic_id=comic_id)
        )
    except Exception as e:
        raise to_http_exception(e, "get bookmark status")


@router.patch("/{comic_id}", response_model=BookmarkResponse)
async def update_bookmark(
    comic_id: str,
    request: UpdateBookmarkAPIRequest,
    update_bookmark_use_case: FromDishka[UpdateBookmarkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> BookmarkResponse:
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await update_bookmark_use_case.execute(
            UpdateBookmarkRequest(
                user_id=user_id,
                comic_id=comic_id,
                status=request.status,
                notes=request.notes,
                last_read_chapter_id=request.last_read_chapter_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update bookmark")


@router.delete("/{comic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_bookmark(
    comic_id: str,
    remove_bookmark_use_case: FromDishka[RemoveBookmarkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    user_id = require_user_id(jwt_service, auth_token)

    try:
        await remove_bookmark_use_case.execute(
            RemoveBookmarkRequest(user_id=user_id, comic_id=comic_id)
        )
    except Exception as e:
        raise to_http_exception(e, "remove bookmark")
