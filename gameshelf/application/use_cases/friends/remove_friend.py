"""Use case ending a friendship."""

from sqlalchemy.orm import Session

from gameshelf.domain.entities import NOTIFICATION_TYPE_FRIEND
from gameshelf.domain.errors import NotFound
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.notifications import dispatch_notifications_changed
from gameshelf.infrastructure.repositories import (
    FriendshipRepository,
    NotificationRepository,
)


def remove_friend(session: Session, *, user_id: int, friend_id: int) -> None:
    """Delete the friendship in both directions and retire its notifications."""

    notification_repository = NotificationRepository(session)
    with atomic(session):
        if not FriendshipRepository(session).delete_pair(user_id, friend_id):
            raise NotFound("Friendship not found")
        retired = {
            user_id: notification_repository.dismiss_live_for_reference(
                NOTIFICATION_TYPE_FRIEND, friend_id, user_id=user_id
            ),
            friend_id: notification_repository.dismiss_live_for_reference(
                NOTIFICATION_TYPE_FRIEND, user_id, user_id=friend_id
            ),
        }

    for recipient, dismissed in retired.items():
        if dismissed:
            dispatch_notifications_changed(recipient)
