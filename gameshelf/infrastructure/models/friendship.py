"""SQLAlchemy model for friendships."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint

from gameshelf.infrastructure.database import Base
from gameshelf.utils import now_in_app_timezone


class FriendshipModel(Base):
    """Friendship created by ``user_id``; membership is symmetric."""

    __tablename__ = "friendship"
    __table_args__ = (
        UniqueConstraint("user_id", "friend_id", name="uq_friendship_pair"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    friend_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )


__all__ = ["FriendshipModel"]
