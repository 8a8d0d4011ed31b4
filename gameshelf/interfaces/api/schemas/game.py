"""Catalogue schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GameCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    console_name: str = Field(..., min_length=1, max_length=100)
    cover_url: str | None = Field(default=None, max_length=500)
    release_year: int | None = None


class GameRead(BaseModel):
    id: int
    title: str
    console_id: int | None
    console_name: str | None
    cover_url: str | None
    release_year: int | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
