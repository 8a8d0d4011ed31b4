"""Use case for editing a collection entry."""

from dataclasses import replace
import logging

from sqlalchemy.orm import Session

from gameshelf.domain.entities import (
    GAME_STATUS_WISHLIST,
    NOTIFICATION_TYPE_WISHLIST,
    UserGame,
)
from gameshelf.domain.errors import NotFound
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.notifications import dispatch_notifications_changed
from gameshelf.infrastructure.repositories import (
    NotificationRepository,
    UserGameRepository,
)

from .validators import ensure_valid_rating, ensure_valid_status

logger = logging.getLogger(__name__)


def update_collection_entry(
    session: Session,
    *,
    user_id: int,
    entry_id: int,
    status: str | None = None,
    notes: str | None = None,
    rating: int | None = None,
) -> UserGame:
    """Update status, notes or rating of an entry owned by ``user_id``.

    Moving an entry out of the wishlist clears its purchase intent and
    dismisses the pending purchase notification in the same transaction.
    """

    repository = UserGameRepository(session)
    current = repository.get_for_owner(entry_id, user_id=user_id)
    if current is None:
        raise NotFound("Collection entry not found")

    new_status = ensure_valid_status(status) if status is not None else current.status
    leaves_wishlist = current.is_wishlist and new_status != GAME_STATUS_WISHLIST

    updated = replace(
        current,
        status=new_status,
        notes=notes if notes is not None else current.notes,
        rating=ensure_valid_rating(rating) if rating is not None else current.rating,
        buy=False if new_status != GAME_STATUS_WISHLIST else current.buy,
    )

    dismissed: list[int] = []
    with atomic(session):
        saved = repository.update(updated)
        if leaves_wishlist:
            dismissed = NotificationRepository(session).dismiss_live_for_reference(
                NOTIFICATION_TYPE_WISHLIST, entry_id, user_id=user_id
            )

    if dismissed:
        logger.info(
            "Entry %s left the wishlist; dismissed notifications %s", entry_id, dismissed
        )
        dispatch_notifications_changed(user_id)
    return saved
