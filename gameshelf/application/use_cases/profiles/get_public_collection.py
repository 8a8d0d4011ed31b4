"""Use case reading the collection another collector made public."""

from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from gameshelf.domain.entities import User, UserGame
from gameshelf.domain.errors import Forbidden, NotFound
from gameshelf.infrastructure.repositories import UserGameRepository, UserRepository


@dataclass
class PublicCollection:
    owner: User
    items: list[UserGame] = field(default_factory=list)


def get_public_collection(session: Session, *, user_id: int) -> PublicCollection:
    """Return the owned games of ``user_id`` when their profile is public.

    Wishlist entries stay private; they are only reachable through a share
    link. Unknown or deactivated users raise :class:`NotFound`, private
    profiles :class:`Forbidden`.
    """

    owner = UserRepository(session).get(user_id)
    if owner is None or not owner.is_active:
        raise NotFound("Profile not found")
    if not owner.is_public:
        raise Forbidden("This profile is private")

    items = [
        item
        for item in UserGameRepository(session).list_for_user(owner.id)
        if not item.is_wishlist
    ]
    return PublicCollection(owner=owner, items=items)
