"""Persistence helpers for achievements and unlocks."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from gameshelf.domain.entities import Achievement, UserAchievement
from gameshelf.infrastructure.database import insert_ignoring_conflicts
from gameshelf.infrastructure.models import AchievementModel, UserAchievementModel
from gameshelf.utils import ensure_app_timezone, now_in_app_timezone


class AchievementRepository:
    """Provide catalogue access and unlock bookkeeping."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> Sequence[Achievement]:
        query = self.session.query(AchievementModel).order_by(
            AchievementModel.points.desc(), AchievementModel.id
        )
        return [self._to_entity(model) for model in query.all()]

    def get_by_code(self, code: str) -> Achievement | None:
        model = self.session.query(AchievementModel).filter_by(code=code).first()
        return self._to_entity(model) if model else None

    def create(self, achievement: Achievement) -> Achievement:
        model = AchievementModel(
            code=achievement.code,
            name=achievement.name,
            description=achievement.description,
            category=achievement.category,
            requirement_type=achievement.requirement_type,
            requirement_value=achievement.requirement_value,
            points=achievement.points,
            icon_url=achievement.icon_url,
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_unlocks_for_user(self, user_id: int) -> Sequence[UserAchievement]:
        query = (
            self.session.query(UserAchievementModel)
            .filter(UserAchievementModel.user_id == user_id)
            .order_by(UserAchievementModel.unlocked_at.desc(), UserAchievementModel.id.desc())
        )
        return [self._to_unlock_entity(model) for model in query.all()]

    def get_unlocks_by_ids(self, unlock_ids: Sequence[int]) -> dict[int, UserAchievement]:
        if not unlock_ids:
            return {}
        query = self.session.query(UserAchievementModel).filter(
            UserAchievementModel.id.in_(set(unlock_ids))
        )
        return {model.id: self._to_unlock_entity(model) for model in query.all()}

    def unlock(self, *, user_id: int, achievement_id: int) -> UserAchievement | None:
        """Record the unlock and return it, or ``None`` if it was already recorded."""

        created = insert_ignoring_conflicts(
            self.session,
            UserAchievementModel,
            {
                "user_id": user_id,
                "achievement_id": achievement_id,
                "unlocked_at": now_in_app_timezone(),
            },
        )
        if not created:
            return None
        model = (
            self.session.query(UserAchievementModel)
            .filter_by(user_id=user_id, achievement_id=achievement_id)
            .one()
        )
        return self._to_unlock_entity(model)

    @staticmethod
    def _to_entity(model: AchievementModel) -> Achievement:
        return Achievement(
            id=model.id,
            code=model.code,
            name=model.name,
            description=model.description,
            category=model.category,
            requirement_type=model.requirement_type,
            requirement_value=model.requirement_value,
            points=model.points,
            icon_url=model.icon_url,
        )

    @classmethod
    def _to_unlock_entity(cls, model: UserAchievementModel) -> UserAchievement:
        return UserAchievement(
            id=model.id,
            user_id=model.user_id,
            achievement_id=model.achievement_id,
            unlocked_at=ensure_app_timezone(model.unlocked_at),
            achievement=cls._to_entity(model.achievement) if model.achievement else None,
        )


__all__ = ["AchievementRepository"]
