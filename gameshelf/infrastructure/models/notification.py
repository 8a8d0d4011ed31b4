"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.sql import expression

from gameshelf.infrastructure.database import Base
from gameshelf.utils import now_in_app_timezone

_SINGLE_REFERENCE_RULE = (
    "(type = 'wishlist' AND user_game_id IS NOT NULL"
    " AND achievement_unlock_id IS NULL AND friend_id IS NULL)"
    " OR (type = 'achievement' AND achievement_unlock_id IS NOT NULL"
    " AND user_game_id IS NULL AND friend_id IS NULL)"
    " OR (type = 'friend' AND friend_id IS NOT NULL"
    " AND user_game_id IS NULL AND achievement_unlock_id IS NULL)"
)


class NotificationModel(Base):
    """Database representation for user notifications.

    The reference columns are deliberately plain integers: the referenced row
    may disappear, and listing heals such orphans by dismissing them.
    """

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    type = Column(String(20), nullable=False)
    user_game_id = Column(Integer, nullable=True, index=True)
    achievement_unlock_id = Column(Integer, nullable=True)
    friend_id = Column(Integer, nullable=True)
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    is_dismissed = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    read_at = Column(DateTime(timezone=True), nullable=True)
    dismissed_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint(_SINGLE_REFERENCE_RULE, name="ck_notification_single_reference"),
        # At most one live notification per recipient and referenced entity.
        Index(
            "uq_notification_live_wishlist",
            user_id,
            user_game_id,
            unique=True,
            sqlite_where=(type == "wishlist") & (is_dismissed == expression.false()),
            postgresql_where=(type == "wishlist") & (is_dismissed == expression.false()),
        ),
        Index(
            "uq_notification_live_achievement",
            user_id,
            achievement_unlock_id,
            unique=True,
            sqlite_where=(type == "achievement") & (is_dismissed == expression.false()),
            postgresql_where=(type == "achievement") & (is_dismissed == expression.false()),
        ),
        Index(
            "uq_notification_live_friend",
            user_id,
            friend_id,
            unique=True,
            sqlite_where=(type == "friend") & (is_dismissed == expression.false()),
            postgresql_where=(type == "friend") & (is_dismissed == expression.false()),
        ),
        Index("ix_notification_user_live", user_id, is_dismissed, created_at),
    )


__all__ = ["NotificationModel"]
