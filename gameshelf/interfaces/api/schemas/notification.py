"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from .base import CamelModel


class NotificationGameRead(CamelModel):
    id: int
    title: str
    cover_url: str | None = None


class NotificationAchievementRead(CamelModel):
    id: int
    name: str
    description: str
    icon_url: str | None = None
    points: int


class NotificationFriendRead(CamelModel):
    id: int
    username: str
    full_name: str | None = None
    avatar_url: str | None = None


class NotificationRead(CamelModel):
    """Representation of a live notification delivered to the client."""

    id: int
    type: str
    is_read: bool
    created_at: datetime | None = None
    read_at: datetime | None = None
    user_game_id: int | None = None
    achievement_unlock_id: int | None = None
    friend_id: int | None = None
    game: NotificationGameRead | None = None
    achievement: NotificationAchievementRead | None = None
    unlocked_at: datetime | None = None
    friend: NotificationFriendRead | None = None


class NotificationListRead(CamelModel):
    notifications: list[NotificationRead]
    count: int
    wishlist_count: int
    achievement_count: int
    friend_count: int


class PurchaseDecisionRead(CamelModel):
    success: bool = True
    item_id: int
    status: str
    buy: bool


__all__ = [
    "NotificationAchievementRead",
    "NotificationFriendRead",
    "NotificationGameRead",
    "NotificationListRead",
    "NotificationRead",
    "PurchaseDecisionRead",
]
