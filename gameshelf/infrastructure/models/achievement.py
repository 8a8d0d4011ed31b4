"""SQLAlchemy models for achievements and unlocks."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from gameshelf.infrastructure.database import Base
from gameshelf.utils import now_in_app_timezone


class AchievementModel(Base):
    """Catalogue of achievements users can unlock."""

    __tablename__ = "achievement"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(50), nullable=False, unique=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(50), nullable=False)
    requirement_type = Column(String(30), nullable=False)
    requirement_value = Column(Integer, nullable=False)
    points = Column(Integer, nullable=False, default=0)
    icon_url = Column(String(500), nullable=True)


class UserAchievementModel(Base):
    """An achievement unlocked by a user."""

    __tablename__ = "user_achievement"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "achievement_id", name="uq_user_achievement_user_achievement"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    achievement_id = Column(
        Integer, ForeignKey("achievement.id"), nullable=False, index=True
    )
    unlocked_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )

    achievement = relationship("AchievementModel", lazy="joined")


__all__ = ["AchievementModel", "UserAchievementModel"]
