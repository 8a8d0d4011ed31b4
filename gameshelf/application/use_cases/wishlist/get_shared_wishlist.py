"""Use case building the anonymous view of a shared wishlist."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from gameshelf.domain.entities import GAME_STATUS_WISHLIST, User, UserGame
from gameshelf.domain.errors import InvalidShareToken
from gameshelf.infrastructure.repositories import UserGameRepository, UserRepository

from .resolve_share_token import resolve_share_token


@dataclass
class SharedWishlist:
    owner: User
    items: list[UserGame]


def get_shared_wishlist(session: Session, *, token: str) -> SharedWishlist:
    """Return the owner of ``token`` and their wishlist sorted by game title."""

    share = resolve_share_token(session, token)
    owner = UserRepository(session).get(share.user_id)
    if owner is None or not owner.is_active:
        raise InvalidShareToken()

    items = UserGameRepository(session).list_for_user(
        owner.id, status=GAME_STATUS_WISHLIST
    )
    ordered = sorted(
        items,
        key=lambda item: ((item.game.title if item.game else "").casefold(), item.id),
    )
    return SharedWishlist(owner=owner, items=ordered)
