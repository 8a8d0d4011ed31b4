"""Use case flagging a notification as read."""

from sqlalchemy.orm import Session

from gameshelf.domain.errors import NotFound
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.notifications import dispatch_notifications_changed
from gameshelf.infrastructure.repositories import NotificationRepository


def mark_notification_read(session: Session, *, notification_id: int, user_id: int) -> None:
    """Set ``read_at`` on a live, unread notification of ``user_id``.

    Unknown, foreign, dismissed and already read notifications all raise
    :class:`NotFound`.
    """

    with atomic(session):
        if not NotificationRepository(session).mark_as_read(
            notification_id, user_id=user_id
        ):
            raise NotFound("Notification not found or already read")

    dispatch_notifications_changed(user_id, notification_id=notification_id)
