"""Use case adding a friend from their friend code."""

import logging

from sqlalchemy.orm import Session

from gameshelf.domain.entities import NOTIFICATION_TYPE_FRIEND, User
from gameshelf.domain.errors import InvalidInput, NotFound
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.notifications import dispatch_notification_created
from gameshelf.infrastructure.repositories import (
    FriendshipRepository,
    NotificationRepository,
    UserRepository,
)
from gameshelf.infrastructure.security import FRIEND_CODE_LENGTH

logger = logging.getLogger(__name__)


def add_friend_by_code(session: Session, *, user_id: int, code: str) -> User:
    """Befriend the owner of ``code`` and notify them; return the new friend."""

    normalized = (code or "").strip().upper()
    if len(normalized) != FRIEND_CODE_LENGTH:
        raise InvalidInput(f"Friend codes have {FRIEND_CODE_LENGTH} characters")

    friend = UserRepository(session).get_by_friend_code(normalized)
    if friend is None or not friend.is_active:
        raise NotFound("No user matches this friend code")
    if friend.id == user_id:
        raise InvalidInput("You cannot add yourself as a friend")

    repository = FriendshipRepository(session)
    if repository.exists(user_id, friend.id):
        raise InvalidInput("You are already friends")

    with atomic(session):
        repository.create(user_id=user_id, friend_id=friend.id)
        notification, created = NotificationRepository(session).create_if_absent(
            user_id=friend.id,
            notification_type=NOTIFICATION_TYPE_FRIEND,
            reference_id=user_id,
        )

    logger.info("User %s added user %s as a friend", user_id, friend.id)
    if created:
        dispatch_notification_created(notification)
    return friend
