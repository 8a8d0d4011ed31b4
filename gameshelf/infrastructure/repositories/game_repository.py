"""Persistence helpers for the game catalogue."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from gameshelf.domain.entities import Console, Game
from gameshelf.infrastructure.models import ConsoleModel, GameModel
from gameshelf.utils import ensure_app_timezone


class GameRepository:
    """Provide read and write access to games and consoles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, game_id: int) -> Game | None:
        model = self.session.get(GameModel, game_id)
        return self.to_entity(model) if model else None

    def search(self, term: str | None = None, *, limit: int = 50) -> Sequence[Game]:
        query = self.session.query(GameModel)
        if term:
            pattern = f"%{term.strip().lower()}%"
            query = query.filter(func.lower(GameModel.title).like(pattern))
        query = query.order_by(func.lower(GameModel.title), GameModel.id).limit(limit)
        return [self.to_entity(model) for model in query.all()]

    def get_or_create_console(self, name: str) -> Console:
        normalized = name.strip()
        model = (
            self.session.query(ConsoleModel)
            .filter(func.lower(ConsoleModel.name) == normalized.lower())
            .first()
        )
        if model is None:
            model = ConsoleModel(name=normalized)
            self.session.add(model)
            self.session.flush()
        return Console(id=model.id, name=model.name)

    def create(self, game: Game) -> Game:
        model = GameModel(
            title=game.title,
            console_id=game.console_id,
            cover_url=game.cover_url,
            release_year=game.release_year,
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self.to_entity(model)

    @staticmethod
    def to_entity(model: GameModel) -> Game:
        console = model.console
        return Game(
            id=model.id,
            title=model.title,
            console_id=model.console_id,
            cover_url=model.cover_url,
            release_year=model.release_year,
            created_at=ensure_app_timezone(model.created_at),
            console=Console(id=console.id, name=console.name) if console else None,
        )


__all__ = ["GameRepository"]
