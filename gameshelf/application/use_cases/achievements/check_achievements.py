"""Use case unlocking the achievements a user has earned."""

import logging

from sqlalchemy.orm import Session

from gameshelf.domain.entities import (
    GAME_STATUS_COMPLETED,
    GAME_STATUS_WISHLIST,
    NOTIFICATION_TYPE_ACHIEVEMENT,
    REQUIREMENT_FRIENDS_COUNT,
    REQUIREMENT_GAMES_COMPLETED,
    REQUIREMENT_GAMES_OWNED,
    REQUIREMENT_WISHLIST_SIZE,
    Notification,
    UserAchievement,
)
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.notifications import dispatch_notification_created
from gameshelf.infrastructure.repositories import (
    AchievementRepository,
    FriendshipRepository,
    NotificationRepository,
    UserGameRepository,
)

logger = logging.getLogger(__name__)


def compute_progress(session: Session, *, user_id: int) -> dict[str, int]:
    """Return the counters achievements are measured against."""

    by_status = UserGameRepository(session).count_by_status(user_id)
    owned = sum(count for status, count in by_status.items() if status != GAME_STATUS_WISHLIST)
    return {
        REQUIREMENT_GAMES_OWNED: owned,
        REQUIREMENT_GAMES_COMPLETED: by_status.get(GAME_STATUS_COMPLETED, 0),
        REQUIREMENT_WISHLIST_SIZE: by_status.get(GAME_STATUS_WISHLIST, 0),
        REQUIREMENT_FRIENDS_COUNT: FriendshipRepository(session).count_for_user(user_id),
    }


def check_achievements(session: Session, *, user_id: int) -> list[UserAchievement]:
    """Unlock every reached achievement and notify the user once per unlock.

    Running it again without progress unlocks nothing.
    """

    repository = AchievementRepository(session)
    notification_repository = NotificationRepository(session)
    progress = compute_progress(session, user_id=user_id)
    unlocked_ids = {unlock.achievement_id for unlock in repository.list_unlocks_for_user(user_id)}

    newly_unlocked: list[UserAchievement] = []
    notifications: list[Notification] = []
    with atomic(session):
        for achievement in repository.list_all():
            if achievement.id in unlocked_ids:
                continue
            if progress.get(achievement.requirement_type, 0) < achievement.requirement_value:
                continue
            unlock = repository.unlock(user_id=user_id, achievement_id=achievement.id)
            if unlock is None:
                continue
            notification, created = notification_repository.create_if_absent(
                user_id=user_id,
                notification_type=NOTIFICATION_TYPE_ACHIEVEMENT,
                reference_id=unlock.id,
            )
            newly_unlocked.append(unlock)
            if created:
                notifications.append(notification)

    for notification in notifications:
        dispatch_notification_created(notification)
    if newly_unlocked:
        logger.info(
            "User %s unlocked %s",
            user_id,
            ", ".join(unlock.achievement.code for unlock in newly_unlocked if unlock.achievement),
        )
    return newly_unlocked
