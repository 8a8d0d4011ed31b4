from __future__ import annotations

import pytest
from fastapi import HTTPException

from gameshelf.domain.errors import (
    AlreadyDismissed,
    AlreadyProcessed,
    Forbidden,
    InvalidInput,
    InvalidShareToken,
    InvalidState,
    NotFound,
    Unauthorized,
    UpstreamFailure,
)
from gameshelf.interfaces.api.routes_helpers import raise_http_error, status_for_error


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (InvalidShareToken(), 404),
        (Unauthorized(), 401),
        (Forbidden(), 403),
        (NotFound(), 404),
        (InvalidInput(), 400),
        (InvalidState(), 400),
        (AlreadyProcessed(), 409),
        (AlreadyDismissed(), 409),
        (UpstreamFailure(), 500),
        (ValueError("plain"), 400),
    ],
)
def test_status_for_error(error: ValueError, expected: int) -> None:
    assert status_for_error(error) == expected


def test_unauthorized_errors_carry_bearer_challenge() -> None:
    with pytest.raises(HTTPException) as exc_info:
        raise_http_error(Unauthorized())

    assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}
    assert exc_info.value.detail == "Not authenticated"


def test_share_token_errors_do_not_challenge() -> None:
    with pytest.raises(HTTPException) as exc_info:
        raise_http_error(InvalidShareToken())

    assert exc_info.value.status_code == 404
    assert exc_info.value.headers is None
