"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import HTTPException, status

from blog.domain.error import (
    AuthorizationError,
    DomainError,
    DuplicateReportError,
    NotFoundError,
    ValidationError,
)


def to_http_exception(error: Exception) -> HTTPException:
    """Map a domain or input error to the matching ``HTTPException``.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        logfire.warn("Resource not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, AuthorizationError):
        logfire.warn("Unauthorized action", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, (ValidationError, DuplicateReportError, ValueError)):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )
    if isinstance(error, DomainError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )

    logfire.error("Unexpected error", error=str(error), error_type=type(error).__name__)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )
