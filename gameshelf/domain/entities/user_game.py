"""Domain entity representing a game in a user's collection or wishlist."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .game import Game

GAME_STATUS_WISHLIST = "WISHLIST"
GAME_STATUS_NOT_STARTED = "NOT_STARTED"
GAME_STATUS_IN_PROGRESS = "IN_PROGRESS"
GAME_STATUS_COMPLETED = "COMPLETED"
GAME_STATUS_DROPPED = "DROPPED"

GAME_STATUSES: tuple[str, ...] = (
    GAME_STATUS_WISHLIST,
    GAME_STATUS_NOT_STARTED,
    GAME_STATUS_IN_PROGRESS,
    GAME_STATUS_COMPLETED,
    GAME_STATUS_DROPPED,
)


@dataclass
class UserGame:
    """Collection entry owned by a single user.

    ``buy`` records that somebody intends to offer the game. It only carries
    meaning while ``status`` is :data:`GAME_STATUS_WISHLIST`.
    """

    id: int | None
    user_id: int
    game_id: int
    status: str
    buy: bool | None = None
    notes: str | None = None
    rating: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    game: Game | None = None

    @property
    def is_wishlist(self) -> bool:
        return self.status == GAME_STATUS_WISHLIST


__all__ = [
    "GAME_STATUS_WISHLIST",
    "GAME_STATUS_NOT_STARTED",
    "GAME_STATUS_IN_PROGRESS",
    "GAME_STATUS_COMPLETED",
    "GAME_STATUS_DROPPED",
    "GAME_STATUSES",
    "UserGame",
]
