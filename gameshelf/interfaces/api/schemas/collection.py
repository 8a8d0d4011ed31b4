"""Schemas for collection entries."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .game import GameRead


class CollectionEntryCreate(BaseModel):
    game_id: int = Field(..., ge=1)
    status: str = "WISHLIST"
    notes: str | None = None
    rating: int | None = None


class CollectionEntryUpdate(BaseModel):
    status: str | None = None
    notes: str | None = None
    rating: int | None = None

    model_config = ConfigDict(extra="forbid")


class CollectionEntryRead(BaseModel):
    id: int
    game_id: int
    status: str
    buy: bool | None
    notes: str | None
    rating: int | None
    created_at: datetime | None
    updated_at: datetime | None
    game: GameRead | None

    model_config = ConfigDict(from_attributes=True)
