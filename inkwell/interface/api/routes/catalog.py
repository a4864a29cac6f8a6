"""Genre and author listing routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from inkwell.application.usecase.catalog import (
    ListAuthorsResponse,
    ListAuthorsUseCase,
    ListGenresResponse,
    ListGenresUseCase,
)

router = APIRouter(tags=["catalog"], route_class=DishkaRoute)


@router.get("/genres", response_model=ListGenresResponse)
async def list_genres(
    list_genres_use_case: FromDishka[ListGenresUseCase],
) -> ListGenresResponse:
    """All genres, ordered by name."""
    return await list_genres_use_case.execute()


@router.get("/authors", response_model=ListAuthorsResponse)
async def list_authors(
    list_authors_use_case: FromDishka[ListAuthorsUseCase],
) -> ListAuthorsResponse:
    return await list_authors_use_case.execute()
