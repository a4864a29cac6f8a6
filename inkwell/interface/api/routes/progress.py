"""Reading progress routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.progress import (
    DeleteProgressRequest,
    DeleteProgressUseCase,
    GetProgressRequest,
    GetProgressUseCase,
    ListProgressRequest,
    ListProgressResponse,
    ListProgressUseCase,
    ProgressItem,
    SaveProgressRequest,
    SaveProgressUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.interface.api.auth import require_user_id
from inkwell.interface.error import to_http_exception

router = APIRouter(prefix="/progress", tags=["progress"], route_class=DishkaRoute)


class SaveProgressAPIRequest(BaseModel):
    """API request for saving the reader position."""

    chapter_id: str
    page_number: int = Field(default=0, ge=0)
    scroll_position: int = Field(default=0, ge=0, le=100)
    progress_percent: int = Field(default=0, ge=0, le=100)


@router.get("", response_model=ListProgressResponse)
async def list_progress(
    list_progress_use_case: FromDishka[ListProgressUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListProgressResponse:
    """Continue-reading shelf, most recently read first."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await list_progress_use_case.execute(
            ListProgressRequest(user_id=user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "list progress")


@router.get("/{comic_id}", response_model=ProgressItem)
async def get_progress(
    comic_id: str,
    get_progress_use_case: FromDishka[GetProgressUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProgressItem:
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await get_progress_use_case.execute(
            GetProgressRequest(user_id=user_id, comic_id=comic_id)
        )
    except Exception as e:
        raise to_http_exception(e, "get progress")


@router.put("/{comic_id}", response_model=ProgressItem)
async def save_progress(
    comic_id: str,
    request: SaveProgressAPIRequest,
    save_progress_use_case: FromDishka[SaveProgressUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProgressItem:
    """Save the reader position in a comic.

    Reaching 100% marks the comic completed; the completion date is kept
    when the user goes back to re-read.

    Raises:
        HTTPException: 400 if the chapter doesn't belong to the comic
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await save_progress_use_case.execute(
            SaveProgressRequest(
                user_id=user_id,
                comic_id=comic_id,
                chapter_id=request.chapter_id,
                page_number=request.page_number,
                scroll_position=request.scroll_position,
                progress_percent=request.progress_percent,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "save progress")


@router.delete("/{comic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_progress(
    comic_id: str,
    delete_progress_use_case: FromDishka[DeleteProgressUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    user_id = require_user_id(jwt_service, auth_token)

    try:
        await delete_progress_use_case.execute(
            DeleteProgressRequest(user_id=user_id, comic_id=comic_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete progress")
