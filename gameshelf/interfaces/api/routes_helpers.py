"""Helper utilities shared across API route handlers."""

from typing import NoReturn

from fastapi import HTTPException, status

from gameshelf.domain.errors import (
    AlreadyProcessed,
    GameShelfError,
    Forbidden,
    InvalidInput,
    InvalidShareToken,
    InvalidState,
    NotFound,
    Unauthorized,
    UpstreamFailure,
)

# Most specific classes first: InvalidShareToken is an Unauthorized.
_STATUS_BY_ERROR: tuple[tuple[type[GameShelfError], int], ...] = (
    (InvalidShareToken, status.HTTP_404_NOT_FOUND),
    (Unauthorized, status.HTTP_401_UNAUTHORIZED),
    (Forbidden, status.HTTP_403_FORBIDDEN),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (InvalidInput, status.HTTP_400_BAD_REQUEST),
    (InvalidState, status.HTTP_400_BAD_REQUEST),
    (AlreadyProcessed, status.HTTP_409_CONFLICT),
    (UpstreamFailure, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for_error(exc: ValueError) -> int:
    """Return the HTTP status matching a use-case failure."""

    for error_class, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def raise_http_error(exc: ValueError) -> NoReturn:
    """Translate a use-case failure into an :class:`HTTPException`."""

    status_code = status_for_error(exc)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    raise HTTPException(status_code=status_code, detail=str(exc), headers=headers) from exc
