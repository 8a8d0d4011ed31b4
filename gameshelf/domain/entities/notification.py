"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_TYPE_WISHLIST = "wishlist"
NOTIFICATION_TYPE_ACHIEVEMENT = "achievement"
NOTIFICATION_TYPE_FRIEND = "friend"

NOTIFICATION_TYPES: tuple[str, ...] = (
    NOTIFICATION_TYPE_WISHLIST,
    NOTIFICATION_TYPE_ACHIEVEMENT,
    NOTIFICATION_TYPE_FRIEND,
)


@dataclass
class Notification:
    """Pending event surfaced to a user until it is dismissed.

    Exactly one of ``user_game_id``, ``achievement_unlock_id`` and
    ``friend_id`` is set, matching ``type``.
    """

    id: int | None
    user_id: int
    type: str
    user_game_id: int | None = None
    achievement_unlock_id: int | None = None
    friend_id: int | None = None
    is_read: bool = False
    is_dismissed: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None
    dismissed_at: datetime | None = None

    @property
    def reference_id(self) -> int | None:
        """Return the identifier of the entity the notification points to."""

        if self.type == NOTIFICATION_TYPE_WISHLIST:
            return self.user_game_id
        if self.type == NOTIFICATION_TYPE_ACHIEVEMENT:
            return self.achievement_unlock_id
        if self.type == NOTIFICATION_TYPE_FRIEND:
            return self.friend_id
        return None


__all__ = [
    "NOTIFICATION_TYPE_WISHLIST",
    "NOTIFICATION_TYPE_ACHIEVEMENT",
    "NOTIFICATION_TYPE_FRIEND",
    "NOTIFICATION_TYPES",
    "Notification",
]
