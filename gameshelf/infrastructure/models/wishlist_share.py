"""SQLAlchemy model for wishlist share tokens."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.sql import expression

from gameshelf.infrastructure.database import Base
from gameshelf.utils import now_in_app_timezone


class WishlistShareModel(Base):
    """Token granting anonymous access to a user's wishlist."""

    __tablename__ = "wishlist_share"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    token = Column(String(64), nullable=False, unique=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )

    __table_args__ = (
        Index(
            "uq_wishlist_share_active_user",
            user_id,
            unique=True,
            sqlite_where=is_active == expression.true(),
            postgresql_where=is_active == expression.true(),
        ),
    )


__all__ = ["WishlistShareModel"]
