"""Persistence helpers for collection and wishlist entries."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from gameshelf.domain.entities import (
    GAME_STATUS_NOT_STARTED,
    GAME_STATUS_WISHLIST,
    UserGame,
)
from gameshelf.infrastructure.models import UserGameModel
from gameshelf.utils import ensure_app_timezone, now_in_app_timezone

from .game_repository import GameRepository


class UserGameRepository:
    """Provide CRUD and guarded state updates for :class:`UserGame` rows.

    The ``set_buy`` and ``promote_from_wishlist`` updates carry their
    precondition in the ``WHERE`` clause and report whether a row matched, so
    a concurrent change between read and write is detected instead of being
    overwritten.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_game_id: int) -> UserGame | None:
        model = self.session.get(UserGameModel, user_game_id)
        return self._to_entity(model) if model else None

    def get_for_owner(self, user_game_id: int, *, user_id: int) -> UserGame | None:
        model = (
            self.session.query(UserGameModel)
            .filter(UserGameModel.id == user_game_id)
            .filter(UserGameModel.user_id == user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def get_by_user_and_game(self, *, user_id: int, game_id: int) -> UserGame | None:
        model = (
            self.session.query(UserGameModel)
            .filter_by(user_id=user_id, game_id=game_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def get_map_by_ids(self, user_game_ids: Sequence[int]) -> dict[int, UserGame]:
        if not user_game_ids:
            return {}
        query = self.session.query(UserGameModel).filter(
            UserGameModel.id.in_(set(user_game_ids))
        )
        return {model.id: self._to_entity(model) for model in query.all()}

    def list_for_user(
        self, user_id: int, *, status: str | None = None
    ) -> Sequence[UserGame]:
        query = self.session.query(UserGameModel).filter(UserGameModel.user_id == user_id)
        if status is not None:
            query = query.filter(UserGameModel.status == status)
        query = query.order_by(UserGameModel.created_at.desc(), UserGameModel.id.desc())
        return [self._to_entity(model) for model in query.all()]

    def count_by_status(self, user_id: int) -> dict[str, int]:
        rows = (
            self.session.query(UserGameModel.status, func.count(UserGameModel.id))
            .filter(UserGameModel.user_id == user_id)
            .group_by(UserGameModel.status)
            .all()
        )
        return {status: count for status, count in rows}

    def create(self, user_game: UserGame) -> UserGame:
        model = UserGameModel(
            user_id=user_game.user_id,
            game_id=user_game.game_id,
            status=user_game.status,
            buy=user_game.buy,
            notes=user_game.notes,
            rating=user_game.rating,
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user_game: UserGame) -> UserGame:
        model = self.session.get(UserGameModel, user_game.id)
        if model is None:
            msg = f"Collection entry with id {user_game.id} not found"
            raise ValueError(msg)
        model.status = user_game.status
        model.buy = user_game.buy
        model.notes = user_game.notes
        model.rating = user_game.rating
        model.updated_at = now_in_app_timezone()
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_game_id: int) -> None:
        model = self.session.get(UserGameModel, user_game_id)
        if model is None:
            msg = f"Collection entry with id {user_game_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.flush()

    def set_buy(self, user_game_id: int, buy: bool, *, user_id: int) -> bool:
        """Set ``buy`` on a wishlist entry of ``user_id``; return ``False`` if none matched."""

        updated = (
            self.session.query(UserGameModel)
            .filter(
                UserGameModel.id == user_game_id,
                UserGameModel.user_id == user_id,
                UserGameModel.status == GAME_STATUS_WISHLIST,
            )
            .update(
                {
                    UserGameModel.buy: buy,
                    UserGameModel.updated_at: now_in_app_timezone(),
                },
                synchronize_session="fetch",
            )
        )
        return updated == 1

    def clear_buy(self, user_game_id: int, *, user_id: int) -> None:
        """Force ``buy`` to false whatever the entry status is."""

        self.session.query(UserGameModel).filter(
            UserGameModel.id == user_game_id,
            UserGameModel.user_id == user_id,
        ).update(
            {
                UserGameModel.buy: False,
                UserGameModel.updated_at: now_in_app_timezone(),
            },
            synchronize_session="fetch",
        )

    def promote_from_wishlist(self, user_game_id: int, *, user_id: int) -> bool:
        """Move a wishlist entry into the collection; return ``False`` if it left the wishlist."""

        updated = (
            self.session.query(UserGameModel)
            .filter(
                UserGameModel.id == user_game_id,
                UserGameModel.user_id == user_id,
                UserGameModel.status == GAME_STATUS_WISHLIST,
            )
            .update(
                {
                    UserGameModel.status: GAME_STATUS_NOT_STARTED,
                    UserGameModel.buy: False,
                    UserGameModel.updated_at: now_in_app_timezone(),
                },
                synchronize_session="fetch",
            )
        )
        return updated == 1

    @staticmethod
    def _to_entity(model: UserGameModel) -> UserGame:
        return UserGame(
            id=model.id,
            user_id=model.user_id,
            game_id=model.game_id,
            status=model.status,
            buy=model.buy,
            notes=model.notes,
            rating=model.rating,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            game=GameRepository.to_entity(model.game) if model.game else None,
        )


__all__ = ["UserGameRepository"]
