"""Precondition checks shared by the purchase decision use cases."""

from sqlalchemy.orm import Session

from gameshelf.domain.entities import NOTIFICATION_TYPE_WISHLIST, Notification, UserGame
from gameshelf.domain.errors import AlreadyProcessed, InvalidState, NotFound
from gameshelf.infrastructure.repositories import (
    NotificationRepository,
    UserGameRepository,
)


def load_pending_purchase(
    session: Session, *, notification_id: int, user_id: int
) -> tuple[Notification, UserGame]:
    """Return the live purchase notification of ``user_id`` and its wishlist item."""

    notification = NotificationRepository(session).get_for_user(
        notification_id, user_id=user_id
    )
    if notification is None:
        raise NotFound("Notification not found")
    if notification.type != NOTIFICATION_TYPE_WISHLIST:
        raise InvalidState("Only wishlist notifications can be validated or refused")
    if notification.is_dismissed:
        raise AlreadyProcessed()

    item = UserGameRepository(session).get_for_owner(
        notification.user_game_id, user_id=user_id
    )
    if item is None:
        raise NotFound("Wishlist item not found")
    if not item.is_wishlist:
        raise InvalidState("This game is no longer in the wishlist")
    return notification, item
