"""Rating use cases."""

from .delete_rating import DeleteRatingRequest, DeleteRatingUseCase
from .get_rating import GetRatingRequest, GetRatingResponse, GetRatingUseCase
from .rate_comic import RateComicRequest, RateComicResponse, RateComicUseCase

__all__ = [
    "DeleteRatingRequest",
    "DeleteRatingUseCase",
    "GetRatingRequest",
    "GetRatingResponse",
    "GetRatingUseCase",
    "RateComicRequest",
    "RateComicResponse",
    "RateComicUseCase",
]
