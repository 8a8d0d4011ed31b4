"""Use case returning the achievement board of a user."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from gameshelf.domain.entities import Achievement, UserAchievement
from gameshelf.infrastructure.repositories import AchievementRepository

from .check_achievements import check_achievements


@dataclass
class AchievementBoard:
    unlocked: list[UserAchievement]
    locked: list[Achievement]
    newly_unlocked: list[UserAchievement]

    @property
    def total(self) -> int:
        return len(self.unlocked) + len(self.locked)

    @property
    def unlocked_count(self) -> int:
        return len(self.unlocked)


def list_achievements(session: Session, *, user_id: int) -> AchievementBoard:
    """Run the unlock check, then split the catalogue into unlocked and locked."""

    newly_unlocked = check_achievements(session, user_id=user_id)

    repository = AchievementRepository(session)
    unlocked = list(repository.list_unlocks_for_user(user_id))
    unlocked_ids = {unlock.achievement_id for unlock in unlocked}
    locked = [
        achievement
        for achievement in repository.list_all()
        if achievement.id not in unlocked_ids
    ]
    return AchievementBoard(unlocked=unlocked, locked=locked, newly_unlocked=newly_unlocked)
