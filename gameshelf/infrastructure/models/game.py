"""SQLAlchemy models for the game catalogue."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from gameshelf.infrastructure.database import Base
from gameshelf.utils import now_in_app_timezone


class ConsoleModel(Base):
    """Platform games are released on."""

    __tablename__ = "console"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)


class GameModel(Base):
    """Catalogue entry shared by every user."""

    __tablename__ = "game"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    console_id = Column(Integer, ForeignKey("console.id"), nullable=True, index=True)
    cover_url = Column(String(500), nullable=True)
    release_year = Column(Integer, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )

    console = relationship("ConsoleModel", lazy="joined")


__all__ = ["ConsoleModel", "GameModel"]
