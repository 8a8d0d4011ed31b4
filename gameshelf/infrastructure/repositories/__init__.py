"""Repository implementations for infrastructure layer."""

from .achievement_repository import AchievementRepository
from .friendship_repository import FriendshipRepository
from .game_repository import GameRepository
from .notification_repository import NotificationRepository
from .user_game_repository import UserGameRepository
from .user_repository import UserRepository
from .wishlist_share_repository import WishlistShareRepository

__all__ = [
    "AchievementRepository",
    "FriendshipRepository",
    "GameRepository",
    "NotificationRepository",
    "UserGameRepository",
    "UserRepository",
    "WishlistShareRepository",
]
