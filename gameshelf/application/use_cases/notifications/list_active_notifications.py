"""Use case listing the live notifications of a user with display data."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
import logging

from sqlalchemy.orm import Session

from gameshelf.domain.entities import (
    NOTIFICATION_TYPE_ACHIEVEMENT,
    NOTIFICATION_TYPE_FRIEND,
    NOTIFICATION_TYPE_WISHLIST,
    Game,
    Notification,
    User,
    UserAchievement,
    UserGame,
)
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.repositories import (
    AchievementRepository,
    NotificationRepository,
    UserGameRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class NotificationView:
    """A notification together with the entity it points to."""

    notification: Notification
    game: Game | None = None
    unlock: UserAchievement | None = None
    friend: User | None = None


@dataclass
class NotificationFeed:
    notifications: list[NotificationView] = field(default_factory=list)
    wishlist_count: int = 0
    achievement_count: int = 0
    friend_count: int = 0

    @property
    def count(self) -> int:
        return len(self.notifications)


def _ids_for(notifications: list[Notification], notification_type: str) -> list[int]:
    return [
        notification.reference_id
        for notification in notifications
        if notification.type == notification_type and notification.reference_id
    ]


def list_active_notifications(session: Session, *, user_id: int) -> NotificationFeed:
    """Return the live notifications of ``user_id``, newest first.

    Notifications whose target vanished, or whose wishlist item left the
    wishlist, are dismissed here and left out of the result.
    """

    repository = NotificationRepository(session)
    notifications = list(repository.list_live_for_user(user_id))

    items: dict[int, UserGame] = UserGameRepository(session).get_map_by_ids(
        _ids_for(notifications, NOTIFICATION_TYPE_WISHLIST)
    )
    unlocks = AchievementRepository(session).get_unlocks_by_ids(
        _ids_for(notifications, NOTIFICATION_TYPE_ACHIEVEMENT)
    )
    friends = UserRepository(session).get_map_by_ids(
        _ids_for(notifications, NOTIFICATION_TYPE_FRIEND)
    )

    views: list[NotificationView] = []
    orphans: list[int] = []
    for notification in notifications:
        view = NotificationView(notification=notification)
        reference_id = notification.reference_id

        if notification.type == NOTIFICATION_TYPE_WISHLIST:
            item = items.get(reference_id)
            if item and item.user_id == user_id and item.is_wishlist and item.game:
                view.game = item.game
        elif notification.type == NOTIFICATION_TYPE_ACHIEVEMENT:
            unlock = unlocks.get(reference_id)
            if unlock and unlock.user_id == user_id and unlock.achievement:
                view.unlock = unlock
        elif notification.type == NOTIFICATION_TYPE_FRIEND:
            friend = friends.get(reference_id)
            if friend and friend.is_active:
                view.friend = friend

        if view.game is None and view.unlock is None and view.friend is None:
            orphans.append(notification.id)
            continue
        views.append(view)

    if orphans:
        with atomic(session):
            repository.dismiss_many(orphans, user_id=user_id)
        logger.warning(
            "Dismissed %s orphaned notification(s) for user %s: %s",
            len(orphans),
            user_id,
            orphans,
        )

    counts = Counter(view.notification.type for view in views)
    return NotificationFeed(
        notifications=views,
        wishlist_count=counts[NOTIFICATION_TYPE_WISHLIST],
        achievement_count=counts[NOTIFICATION_TYPE_ACHIEVEMENT],
        friend_count=counts[NOTIFICATION_TYPE_FRIEND],
    )
