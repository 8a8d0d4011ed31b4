"""Use case listing public collector profiles."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from gameshelf.domain.entities import User
from gameshelf.infrastructure.repositories import UserRepository

MAX_RESULTS = 50


def search_profiles(session: Session, *, username: str | None = None) -> Sequence[User]:
    """Return public profiles ordered by username, filtered by a partial username."""

    term = (username or "").strip() or None
    return UserRepository(session).search_public(term, limit=MAX_RESULTS)
