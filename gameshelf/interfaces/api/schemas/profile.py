"""Schemas for public collector profiles."""

from datetime import datetime

from .base import CamelModel
from .wishlist import SharedGameRead


class PublicProfileRead(CamelModel):
    id: int
    username: str
    full_name: str | None = None
    avatar_url: str | None = None
    created_at: datetime | None = None


class ProfileSearchRead(CamelModel):
    profiles: list[PublicProfileRead]
    count: int


class PublicCollectionEntryRead(CamelModel):
    id: int
    game_id: int
    status: str
    rating: int | None = None
    notes: str | None = None
    created_at: datetime | None = None
    game: SharedGameRead | None = None


class PublicCollectionRead(CamelModel):
    profile: PublicProfileRead
    games: list[PublicCollectionEntryRead]
