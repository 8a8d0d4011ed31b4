"""Achievement board endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gameshelf.application.use_cases.achievements import list_achievements
from gameshelf.domain.entities import Achievement, User, UserAchievement
from gameshelf.infrastructure.database import get_db
from gameshelf.interfaces.api.dependencies import get_current_active_user
from gameshelf.interfaces.api.schemas import (
    AchievementBoardRead,
    AchievementRead,
    UserAchievementRead,
)

router = APIRouter(prefix="/achievements", tags=["achievements"])


def _achievement_to_schema(achievement: Achievement) -> AchievementRead:
    return AchievementRead(
        id=achievement.id,
        code=achievement.code,
        name=achievement.name,
        description=achievement.description,
        category=achievement.category,
        requirement_type=achievement.requirement_type,
        requirement_value=achievement.requirement_value,
        points=achievement.points,
        icon_url=achievement.icon_url,
    )


def _unlock_to_schema(unlock: UserAchievement) -> UserAchievementRead:
    return UserAchievementRead(
        id=unlock.id,
        achievement_id=unlock.achievement_id,
        unlocked_at=unlock.unlocked_at,
        achievement=_achievement_to_schema(unlock.achievement),
    )


def _locked_to_schema(achievement: Achievement) -> UserAchievementRead:
    return UserAchievementRead(
        id=None,
        achievement_id=achievement.id,
        unlocked_at=None,
        achievement=_achievement_to_schema(achievement),
    )


@router.get("", response_model=AchievementBoardRead)
def read_achievements(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Unlock what the caller has earned, then return the whole board."""

    board = list_achievements(db, user_id=current_user.id)
    return AchievementBoardRead(
        unlocked=[_unlock_to_schema(unlock) for unlock in board.unlocked if unlock.achievement],
        locked=[_locked_to_schema(achievement) for achievement in board.locked],
        total=board.total,
        unlocked_count=board.unlocked_count,
        newly_unlocked=[
            _unlock_to_schema(unlock) for unlock in board.newly_unlocked if unlock.achievement
        ],
    )
