"""Rutas públicas para descubrir coleccionistas y sus colecciones."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from gameshelf.application.use_cases.profiles import get_public_collection, search_profiles
from gameshelf.domain.entities import User, UserGame
from gameshelf.infrastructure.database import get_db
from gameshelf.interfaces.api.routes_helpers import raise_http_error
from gameshelf.interfaces.api.schemas import (
    ProfileSearchRead,
    PublicCollectionEntryRead,
    PublicCollectionRead,
    PublicProfileRead,
    SharedGameRead,
)

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _profile_to_schema(user: User) -> PublicProfileRead:
    return PublicProfileRead(
        id=user.id,
        username=user.username,
        full_name=user.full_name,
        avatar_url=user.avatar_url,
        created_at=user.created_at,
    )


def _entry_to_schema(item: UserGame) -> PublicCollectionEntryRead:
    game = None
    if item.game is not None:
        game = SharedGameRead(
            id=item.game.id,
            title=item.game.title,
            cover_url=item.game.cover_url,
            console_name=item.game.console_name,
        )
    return PublicCollectionEntryRead(
        id=item.id,
        game_id=item.game_id,
        status=item.status,
        rating=item.rating,
        notes=item.notes,
        created_at=item.created_at,
        game=game,
    )


@router.get("/search", response_model=ProfileSearchRead)
def search(
    username: str | None = Query(default=None, max_length=30),
    db: Session = Depends(get_db),
):
    """Busca perfiles públicos por coincidencia parcial del nombre de usuario."""

    profiles = [_profile_to_schema(user) for user in search_profiles(db, username=username)]
    return ProfileSearchRead(profiles=profiles, count=len(profiles))


@router.get("/{user_id}/games", response_model=PublicCollectionRead)
def read_profile_games(user_id: int, db: Session = Depends(get_db)):
    """Devuelve los juegos de un perfil público; la lista de deseos queda fuera."""

    try:
        collection = get_public_collection(db, user_id=user_id)
    except ValueError as exc:
        raise_http_error(exc)
    return PublicCollectionRead(
        profile=_profile_to_schema(collection.owner),
        games=[_entry_to_schema(item) for item in collection.items],
    )
