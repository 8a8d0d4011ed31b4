"""SQLAlchemy model for collection and wishlist entries."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from gameshelf.domain.entities import GAME_STATUS_WISHLIST, GAME_STATUSES
from gameshelf.infrastructure.database import Base
from gameshelf.utils import now_in_app_timezone

_status_values = ", ".join(f"'{status}'" for status in GAME_STATUSES)


class UserGameModel(Base):
    """A game tracked by a user, either owned or wished for."""

    __tablename__ = "user_game"
    __table_args__ = (
        UniqueConstraint("user_id", "game_id", name="uq_user_game_user_game"),
        CheckConstraint(f"status IN ({_status_values})", name="ck_user_game_status"),
        CheckConstraint(
            "rating IS NULL OR (rating >= 0 AND rating <= 10)",
            name="ck_user_game_rating",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    game_id = Column(Integer, ForeignKey("game.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=GAME_STATUS_WISHLIST)
    buy = Column(Boolean, nullable=True)
    notes = Column(Text, nullable=True)
    rating = Column(Integer, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )

    game = relationship("GameModel", lazy="joined")


__all__ = ["UserGameModel"]
