"""Use case for deleting a collection entry."""

from sqlalchemy.orm import Session

from gameshelf.domain.entities import NOTIFICATION_TYPE_WISHLIST
from gameshelf.domain.errors import NotFound
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.notifications import dispatch_notifications_changed
from gameshelf.infrastructure.repositories import (
    NotificationRepository,
    UserGameRepository,
)


def remove_from_collection(session: Session, *, user_id: int, entry_id: int) -> None:
    """Delete the entry and retire any live purchase notification pointing at it."""

    repository = UserGameRepository(session)
    if repository.get_for_owner(entry_id, user_id=user_id) is None:
        raise NotFound("Collection entry not found")

    with atomic(session):
        dismissed = NotificationRepository(session).dismiss_live_for_reference(
            NOTIFICATION_TYPE_WISHLIST, entry_id, user_id=user_id
        )
        repository.delete(entry_id)

    if dismissed:
        dispatch_notifications_changed(user_id)
