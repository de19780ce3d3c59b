"""Translate domain errors into HTTP errors."""

from fastapi import HTTPException, status

from sport_matching.errors import (
    ForbiddenError,
    InvalidMatchRequestError,
    InvalidProfileUpdateError,
    NotFoundError,
    RepositoryUnavailableError,
)

STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidMatchRequestError: status.HTTP_400_BAD_REQUEST,
    InvalidProfileUpdateError: status.HTTP_400_BAD_REQUEST,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    RepositoryUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Build the HTTPException for an error raised while performing `action`.

    Domain errors keep their message; anything else becomes a 500.
    """
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}: {error}",
    )
