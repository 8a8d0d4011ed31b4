"""Domain entities exposed by the application."""

from .achievement import (
    REQUIREMENT_FRIENDS_COUNT,
    REQUIREMENT_GAMES_COMPLETED,
    REQUIREMENT_GAMES_OWNED,
    REQUIREMENT_TYPES,
    REQUIREMENT_WISHLIST_SIZE,
    Achievement,
    UserAchievement,
)
from .friendship import Friendship
from .game import Console, Game
from .notification import (
    NOTIFICATION_TYPE_ACHIEVEMENT,
    NOTIFICATION_TYPE_FRIEND,
    NOTIFICATION_TYPE_WISHLIST,
    NOTIFICATION_TYPES,
    Notification,
)
from .user import User
from .user_game import (
    GAME_STATUS_COMPLETED,
    GAME_STATUS_DROPPED,
    GAME_STATUS_IN_PROGRESS,
    GAME_STATUS_NOT_STARTED,
    GAME_STATUS_WISHLIST,
    GAME_STATUSES,
    UserGame,
)
from .wishlist_share import WishlistShare

__all__ = [
    "Achievement",
    "UserAchievement",
    "REQUIREMENT_GAMES_OWNED",
    "REQUIREMENT_GAMES_COMPLETED",
    "REQUIREMENT_WISHLIST_SIZE",
    "REQUIREMENT_FRIENDS_COUNT",
    "REQUIREMENT_TYPES",
    "Friendship",
    "Console",
    "Game",
    "Notification",
    "NOTIFICATION_TYPE_WISHLIST",
    "NOTIFICATION_TYPE_ACHIEVEMENT",
    "NOTIFICATION_TYPE_FRIEND",
    "NOTIFICATION_TYPES",
    "User",
    "UserGame",
    "GAME_STATUS_WISHLIST",
    "GAME_STATUS_NOT_STARTED",
    "GAME_STATUS_IN_PROGRESS",
    "GAME_STATUS_COMPLETED",
    "GAME_STATUS_DROPPED",
    "GAME_STATUSES",
    "WishlistShare",
]
