"""Use case declining a gift: the item stays in the wishlist."""

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


def refuse_purchase(session: Session, *, notification_id: int, user_id: int) -> UserGame:
    """Reset ``buy`` to false on the item and dismiss the notification."""

    notification, item = load_pending_purchase(
        session, notification_id=notification_id, user_id=user_id
    )
    repository = UserGameRepository(session)

    with atomic(session):
        if not repository.set_buy(item.id, False, user_id=user_id):
            raise InvalidState("This game is no longer in the wishlist")
        if not NotificationRepository(session).dismiss(notification.id, user_id=user_id):
            raise AlreadyProcessed()

    logger.info(
        "User %s refused purchase notification %s for item %s",
        user_id,
        notification.id,
        item.id,
    )
    dispatch_notifications_changed(user_id, notification_id=notification.id)

    refused = repository.get(item.id)
    if refused is None:
        raise NotFound("Wishlist item not found")
    return refused
