"""Use case dismissing any kind of notification."""

from sqlalchemy.orm import Session

from gameshelf.domain.entities import NOTIFICATION_TYPE_WISHLIST
from gameshelf.domain.errors import AlreadyDismissed, NotFound
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.notifications import dispatch_notifications_changed
from gameshelf.infrastructure.repositories import (
    NotificationRepository,
    UserGameRepository,
)


def dismiss_notification(session: Session, *, notification_id: int, user_id: int) -> None:
    """Dismiss the notification; wishlist ones also reset the item's ``buy`` flag.

    Resetting ``buy`` keeps the next purchase intent able to raise a fresh
    notification.
    """

    repository = NotificationRepository(session)
    notification = repository.get_for_user(notification_id, user_id=user_id)
    if notification is None:
        raise NotFound("Notification not found")
    if notification.is_dismissed:
        raise AlreadyDismissed()

    with atomic(session):
        if not repository.dismiss(notification_id, user_id=user_id):
            raise AlreadyDismissed()
        if notification.type == NOTIFICATION_TYPE_WISHLIST:
            UserGameRepository(session).clear_buy(
                notification.user_game_id, user_id=user_id
            )

    dispatch_notifications_changed(user_id, notification_id=notification_id)
