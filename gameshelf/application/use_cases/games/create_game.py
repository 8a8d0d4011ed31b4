"""Use case for adding games to the catalogue."""

from sqlalchemy.orm import Session

from gameshelf.domain.entities import Game
from gameshelf.domain.errors import InvalidInput
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.repositories import GameRepository

MIN_RELEASE_YEAR = 1950
MAX_RELEASE_YEAR = 2100


def create_game(
    session: Session,
    *,
    title: str,
    console_name: str,
    cover_url: str | None = None,
    release_year: int | None = None,
) -> Game:
    """Create a game, registering its console on first use."""

    title = title.strip()
    console_name = console_name.strip()
    if not title:
        raise InvalidInput("Game title is required")
    if not console_name:
        raise InvalidInput("Console name is required")
    if release_year is not None and not MIN_RELEASE_YEAR <= release_year <= MAX_RELEASE_YEAR:
        raise InvalidInput(
            f"Release year must be between {MIN_RELEASE_YEAR} and {MAX_RELEASE_YEAR}"
        )

    repository = GameRepository(session)
    with atomic(session):
        console = repository.get_or_create_console(console_name)
        game = repository.create(
            Game(
                id=None,
                title=title,
                console_id=console.id,
                cover_url=cover_url,
                release_year=release_year,
            )
        )
    return game
