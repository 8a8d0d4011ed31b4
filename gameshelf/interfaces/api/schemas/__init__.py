from .achievement import AchievementBoardRead, AchievementRead, UserAchievementRead
from .auth import Token
from .base import CamelModel, SuccessResponse
from .collection import CollectionEntryCreate, CollectionEntryRead, CollectionEntryUpdate
from .contact import ContactMessageCreate
from .friend import (
    AddFriendByCodeRequest,
    AddFriendRead,
    FriendListRead,
    FriendRead,
    RemoveFriendRequest,
)
from .game import GameCreate, GameRead
from .notification import (
    NotificationAchievementRead,
    NotificationFriendRead,
    NotificationGameRead,
    NotificationListRead,
    NotificationRead,
    PurchaseDecisionRead,
)
from .profile import (
    ProfileSearchRead,
    PublicCollectionEntryRead,
    PublicCollectionRead,
    PublicProfileRead,
)
from .user import UserCreate, UserRead, UserUpdate
from .wishlist import (
    SharedGameRead,
    SharedWishlistItemRead,
    SharedWishlistRead,
    WishlistBuyRequest,
    WishlistOwnerRead,
    WishlistShareRead,
    WishlistShareToggleRead,
    WishlistShareToggleRequest,
)

__all__ = [
    "AchievementBoardRead",
    "AchievementRead",
    "UserAchievementRead",
    "Token",
    "CamelModel",
    "SuccessResponse",
    "CollectionEntryCreate",
    "CollectionEntryRead",
    "CollectionEntryUpdate",
    "ContactMessageCreate",
    "AddFriendByCodeRequest",
    "AddFriendRead",
    "FriendListRead",
    "FriendRead",
    "RemoveFriendRequest",
    "GameCreate",
    "GameRead",
    "NotificationAchievementRead",
    "NotificationFriendRead",
    "NotificationGameRead",
    "NotificationListRead",
    "NotificationRead",
    "PurchaseDecisionRead",
    "ProfileSearchRead",
    "PublicCollectionEntryRead",
    "PublicCollectionRead",
    "PublicProfileRead",
    "UserCreate",
    "UserRead",
    "UserUpdate",
    "SharedGameRead",
    "SharedWishlistItemRead",
    "SharedWishlistRead",
    "WishlistBuyRequest",
    "WishlistOwnerRead",
    "WishlistShareRead",
    "WishlistShareToggleRead",
    "WishlistShareToggleRequest",
]
