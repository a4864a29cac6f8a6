"""Reading progress use cases."""

from .delete_progress import DeleteProgressRequest, DeleteProgressUseCase
from .get_progress import (
    ContinueReadingItem,
    GetProgressRequest,
    GetProgressUseCase,
    ListProgressRequest,
    ListProgressResponse,
    ListProgressUseCase,
)
from .save_progress import ProgressItem, SaveProgressRequest, SaveProgressUseCase

__all__ = [
    "ContinueReadingItem",
    "DeleteProgressRequest",
    "DeleteProgressUseCase",
    "GetProgressRequest",
    "GetProgressUseCase",
    "ListProgressRequest",
    "ListProgressResponse",
    "ListProgressUseCase",
    "ProgressItem",
    "SaveProgressRequest",
    "SaveProgressUseCase",
]
