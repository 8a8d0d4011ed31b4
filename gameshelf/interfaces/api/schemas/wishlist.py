"""Schemas for wishlist sharing and purchase intent."""

from pydantic import Field

from .base import CamelModel


class WishlistBuyRequest(CamelModel):
    token: str | None = None
    item_id: int = Field(..., ge=1)
    buy: bool


class SharedGameRead(CamelModel):
    id: int
    title: str
    cover_url: str | None = None
    console_name: str | None = None


class SharedWishlistItemRead(CamelModel):
    item_id: int
    buy: bool
    game: SharedGameRead


class WishlistOwnerRead(CamelModel):
    username: str
    full_name: str | None = None


class SharedWishlistRead(CamelModel):
    owner: WishlistOwnerRead
    items: list[SharedWishlistItemRead]


class WishlistShareRead(CamelModel):
    token: str
    share_url: str
    is_active: bool = True


class WishlistShareToggleRequest(CamelModel):
    is_active: bool


class WishlistShareToggleRead(CamelModel):
    is_active: bool
    token: str | None = None
    share_url: str | None = None
