"""Domain entities describing the game catalogue."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Console:
    """Platform a game is released on."""

    id: int | None
    name: str


@dataclass
class Game:
    """Catalogue entry shared by every user."""

    id: int | None
    title: str
    console_id: int | None
    cover_url: str | None
    release_year: int | None
    created_at: datetime | None = None
    console: Console | None = None

    @property
    def console_name(self) -> str | None:
        return self.console.name if self.console else None


__all__ = ["Console", "Game"]
