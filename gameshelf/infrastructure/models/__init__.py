"""ORM models used by the application infrastructure."""

from .achievement import AchievementModel, UserAchievementModel
from .friendship import FriendshipModel
from .game import ConsoleModel, GameModel
from .notification import NotificationModel
from .user import UserModel
from .user_game import UserGameModel
from .wishlist_share import WishlistShareModel

__all__ = [
    "AchievementModel",
    "UserAchievementModel",
    "FriendshipModel",
    "ConsoleModel",
    "GameModel",
    "NotificationModel",
    "UserModel",
    "UserGameModel",
    "WishlistShareModel",
]
