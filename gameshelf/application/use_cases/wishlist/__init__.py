"""Use cases for wishlist sharing and purchase intent."""

from .get_or_create_share import get_or_create_share
from .get_shared_wishlist import SharedWishlist, get_shared_wishlist
from .resolve_share_token import resolve_share_token
from .rotate_share_token import rotate_share_token
from .toggle_buy import toggle_buy
from .toggle_share_active import toggle_share_active

__all__ = [
    "SharedWishlist",
    "get_or_create_share",
    "get_shared_wishlist",
    "resolve_share_token",
    "rotate_share_token",
    "toggle_buy",
    "toggle_share_active",
]
