"""Use case for browsing the catalogue."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from gameshelf.domain.entities import Game
from gameshelf.infrastructure.repositories import GameRepository

MAX_SEARCH_RESULTS = 100


def search_games(
    session: Session, *, search: str | None = None, limit: int = 50
) -> Sequence[Game]:
    """Return games whose title contains ``search``, alphabetically."""

    limit = max(1, min(limit, MAX_SEARCH_RESULTS))
    return GameRepository(session).search(search, limit=limit)
