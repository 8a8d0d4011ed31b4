"""Use case for listing a user's collection entries."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from gameshelf.domain.entities import UserGame
from gameshelf.infrastructure.repositories import UserGameRepository

from .validators import ensure_valid_status


def list_collection(
    session: Session, *, user_id: int, status: str | None = None
) -> Sequence[UserGame]:
    if status is not None:
        status = ensure_valid_status(status)
    return UserGameRepository(session).list_for_user(user_id, status=status)
