"""Use case for retrieving a single game."""

from sqlalchemy.orm import Session

from gameshelf.domain.entities import Game
from gameshelf.domain.errors import NotFound
from gameshelf.infrastructure.repositories import GameRepository


def get_game(session: Session, game_id: int) -> Game:
    game = GameRepository(session).get(game_id)
    if game is None:
        raise NotFound("Game not found")
    return game
