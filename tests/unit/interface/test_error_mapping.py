"""Tests for translating errors into HTTP responses."""

import pytest
from fastapi import HTTPException

from inkwell.domain.error import (
    AlreadyExistsError,
    AuthenticationError,
    ContentDeletedException,
    IncorrectPasswordError,
    NotAuthorizedError,
    NotFoundError,
)
from inkwell.interface.error import InvalidQueryError, to_http_exception


class TestToHttpException:
    """Tests for to_http_exception."""

    @pytest.mark.parametrize(
        "error,status_code",
        [
            (AuthenticationError(), 401),
            (NotAuthorizedError("comment", "c1", "u1"), 403),
            (IncorrectPasswordError(), 403),
            (ContentDeletedException("comment", "c1"), 404),
            (NotFoundError("Comic", "night-shift"), 404),
            (AlreadyExistsError("Bookmark", "c1"), 409),
            (InvalidQueryError("limit too large"), 400),
            (ValueError("Cannot reply to a deleted comment"), 400),
        ],
    )
    def test_known_errors(self, error, status_code):
        result = to_http_exception(error, "do things")

        assert result.status_code == status_code
        assert result.detail == str(error)

    def test_http_exception_passes_through(self):
        original = HTTPException(status_code=418, detail="teapot")

        assert to_http_exception(original, "brew") is original

    def test_unexpected_error_hides_details(self):
        result = to_http_exception(RuntimeError("db exploded"), "load comments")

        assert result.status_code == 500
        assert result.detail == "Failed to load comments"
