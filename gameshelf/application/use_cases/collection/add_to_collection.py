"""Use case for adding a game to a user's collection or wishlist."""

from sqlalchemy.orm import Session

from gameshelf.domain.entities import GAME_STATUS_WISHLIST, UserGame
from gameshelf.domain.errors import InvalidInput, NotFound
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.repositories import GameRepository, UserGameRepository

from .validators import ensure_valid_rating, ensure_valid_status


def add_to_collection(
    session: Session,
    *,
    user_id: int,
    game_id: int,
    status: str = GAME_STATUS_WISHLIST,
    notes: str | None = None,
    rating: int | None = None,
) -> UserGame:
    """Create a collection entry; wishlist entries start without purchase intent."""

    status = ensure_valid_status(status)
    ensure_valid_rating(rating)

    if GameRepository(session).get(game_id) is None:
        raise NotFound("Game not found")

    repository = UserGameRepository(session)
    if repository.get_by_user_and_game(user_id=user_id, game_id=game_id):
        raise InvalidInput("This game is already in your collection")

    entry = UserGame(
        id=None,
        user_id=user_id,
        game_id=game_id,
        status=status,
        buy=None if status == GAME_STATUS_WISHLIST else False,
        notes=notes,
        rating=rating,
    )
    with atomic(session):
        created = repository.create(entry)
    return created
