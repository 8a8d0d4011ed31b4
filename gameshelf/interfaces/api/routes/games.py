"""Game catalogue endpoints."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from gameshelf.application.use_cases.games import create_game, get_game, search_games
from gameshelf.domain.entities import User
from gameshelf.infrastructure.database import get_db
from gameshelf.interfaces.api.dependencies import get_current_active_user
from gameshelf.interfaces.api.routes_helpers import raise_http_error
from gameshelf.interfaces.api.schemas import GameCreate, GameRead

router = APIRouter(prefix="/games", tags=["games"])


@router.post("", response_model=GameRead, status_code=status.HTTP_201_CREATED)
def register_game(
    game_in: GameCreate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    try:
        game = create_game(
            db,
            title=game_in.title,
            console_name=game_in.console_name,
            cover_url=game_in.cover_url,
            release_year=game_in.release_year,
        )
    except ValueError as exc:
        raise_http_error(exc)
    return GameRead.model_validate(game)


@router.get("", response_model=list[GameRead])
def list_games(
    search: str | None = Query(default=None, max_length=100),
    limit: int = Query(default=50, ge=1, le=100),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Search the catalogue by title."""

    return [GameRead.model_validate(game) for game in search_games(db, search=search, limit=limit)]


@router.get("/{game_id}", response_model=GameRead)
def read_game(
    game_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    try:
        game = get_game(db, game_id)
    except ValueError as exc:
        raise_http_error(exc)
    return GameRead.model_validate(game)
