"""Use case accepting a gift: the wishlist item joins the collection."""

import logging

from sqlalchemy.orm import Session

from gameshelf.domain.entities import UserGame
from gameshelf.domain.errors import AlreadyProcessed, InvalidState, NotFound
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.notifications import dispatch_notifications_changed
from gameshelf.infrastructure.repositories import (
    NotificationRepository,
    UserGameRepository,
)

from .validators import load_pending_purchase

logger = logging.getLogger(__name__)


def validate_purchase(session: Session, *, notification_id: int, user_id: int) -> UserGame:
    """Move the item to ``NOT_STARTED`` with ``buy`` false and dismiss the notification.

    Both writes are conditional on the state checked beforehand; if another
    request changed it in between, nothing is committed.
    """

    notification, item = load_pending_purchase(
        session, notification_id=notification_id, user_id=user_id
    )
    repository = UserGameRepository(session)

    with atomic(session):
        if not repository.promote_from_wishlist(item.id, user_id=user_id):
            raise InvalidState("This game is no longer in the wishlist")
        if not NotificationRepository(session).dismiss(notification.id, user_id=user_id):
            raise AlreadyProcessed()

    logger.info(
        "User %s validated purchase notification %s for item %s",
        user_id,
        notification.id,
        item.id,
    )
    dispatch_notifications_changed(user_id, notification_id=notification.id)

    promoted = repository.get(item.id)
    if promoted is None:
        raise NotFound("Wishlist item not found")
    return promoted
