"""Rating routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.rating import (
    DeleteRatingRequest,
    DeleteRatingUseCase,
    GetRatingRequest,
    GetRatingResponse,
    GetRatingUseCase,
    RateComicRequest,
    RateComicResponse,
    RateComicUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.interface.api.auth import require_user_id
from inkwell.interface.error import to_http_exception

router = APIRouter(prefix="/ratings", tags=["ratings"], route_class=DishkaRoute)


class RateComicAPIRequest(BaseModel):
    """API request for rating a comic."""

    rating: int = Field(ge=1, le=5)
    review: str | None = Field(default=None, max_length=1000)


@router.get("/{comic_id}", response_model=GetRatingResponse)
async def get_rating(
    comic_id: str,
    get_rating_use_case: FromDishka[GetRatingUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetRatingResponse:
    """Rating summary of a comic, with the user's own rating when signed in."""
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await get_rating_use_case.execute(
            GetRatingRequest(comic_id=comic_id, user_id=user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "get rating")


@router.put("/{comic_id}", response_model=RateComicResponse)
async def rate_comic(
    comic_id: str,
    request: RateComicAPIRequest,
    rate_comic_use_case: FromDishka[RateComicUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RateComicResponse:
    """Rate a comic 1-5. Rating again replaces the previous rating."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await rate_comic_use_case.execute(
            RateComicRequest(
                user_id=user_id,
                comic_id=comic_id,
                rating=request.rating,
                review=request.review,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "rate comic")


@router.delete("/{comic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_rating(
    comic_id: str,
    delete_rating_use_case: FromDishka[DeleteRatingUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    user_id = require_user_id(jwt_service, auth_token)

    try:
        await delete_rating_use_case.execute(
            DeleteRatingRequest(user_id=user_id, comic_id=comic_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete rating")
