"""Achievement board schemas."""

from datetime import datetime

from .base import CamelModel


class AchievementRead(CamelModel):
    id: int
    code: str
    name: str
    description: str
    category: str
    requirement_type: str
    requirement_value: int
    points: int
    icon_url: str | None = None


class UserAchievementRead(CamelModel):
    id: int | None
    achievement_id: int
    unlocked_at: datetime | None
    achievement: AchievementRead


class AchievementBoardRead(CamelModel):
    unlocked: list[UserAchievementRead]
    locked: list[UserAchievementRead]
    total: int
    unlocked_count: int
    newly_unlocked: list[UserAchievementRead]
