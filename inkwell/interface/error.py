"""Interface layer errors and their HTTP translation."""

import logfire
from fastapi import HTTPException, status

from inkwell.domain.error import (
    AlreadyExistsError,
    AuthenticationError,
    ContentDeletedException,
    NotAuthorizedError,
    NotFoundError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class InvalidQueryError(InterfaceError):
    """Query parameters outside what the API accepts."""

    pass


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Translate an error raised by a use case into an HTTP error.

    Args:
        error: Exception raised while serving the request
        action: What the route was doing, for the 500 message and the log

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, AuthenticationError):
        return HTTPException(status.HTTP_401_UNAUTHORIZED, detail=str(error))
    if isinstance(error, NotAuthorizedError):
        logfire.warn("Forbidden action", action=action, error=str(error))
        return HTTPException(status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, ContentDeletedException):
        return HTTPException(status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, AlreadyExistsError):
        return HTTPException(status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, (InterfaceError, ValueError)):
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error(
        "Unexpected error in route",
        action=action,
        error=str(error),
        error_type=type(error).__name__,
    )
    return HTTPException(
        status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to {action}"
    )
