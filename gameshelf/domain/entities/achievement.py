"""Domain entities for achievements and their unlocks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

REQUIREMENT_GAMES_OWNED = "games_owned"
REQUIREMENT_GAMES_COMPLETED = "games_completed"
REQUIREMENT_WISHLIST_SIZE = "wishlist_size"
REQUIREMENT_FRIENDS_COUNT = "friends_count"

REQUIREMENT_TYPES: tuple[str, ...] = (
    REQUIREMENT_GAMES_OWNED,
    REQUIREMENT_GAMES_COMPLETED,
    REQUIREMENT_WISHLIST_SIZE,
    REQUIREMENT_FRIENDS_COUNT,
)


@dataclass
class Achievement:
    """Goal a user unlocks once a counter reaches ``requirement_value``."""

    id: int | None
    code: str
    name: str
    description: str
    category: str
    requirement_type: str
    requirement_value: int
    points: int
    icon_url: str | None = None


@dataclass
class UserAchievement:
    """Record of a user unlocking an achievement."""

    id: int | None
    user_id: int
    achievement_id: int
    unlocked_at: datetime | None = None
    achievement: Achievement | None = None


__all__ = [
    "REQUIREMENT_GAMES_OWNED",
    "REQUIREMENT_GAMES_COMPLETED",
    "REQUIREMENT_WISHLIST_SIZE",
    "REQUIREMENT_FRIENDS_COUNT",
    "REQUIREMENT_TYPES",
    "Achievement",
    "UserAchievement",
]
