"""Persistence helpers for friendships."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from gameshelf.domain.entities import Friendship
from gameshelf.infrastructure.models import FriendshipModel
from gameshelf.utils import ensure_app_timezone


def _pair_filter(user_id: int, other_id: int):
    return or_(
        (FriendshipModel.user_id == user_id) & (FriendshipModel.friend_id == other_id),
        (FriendshipModel.user_id == other_id) & (FriendshipModel.friend_id == user_id),
    )


class FriendshipRepository:
    """Friendships are stored once per pair and read in both directions."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: int) -> Sequence[Friendship]:
        query = (
            self.session.query(FriendshipModel)
            .filter(
                or_(
                    FriendshipModel.user_id == user_id,
                    FriendshipModel.friend_id == user_id,
                )
            )
            .order_by(FriendshipModel.created_at, FriendshipModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def count_for_user(self, user_id: int) -> int:
        return (
            self.session.query(func.count(FriendshipModel.id))
            .filter(
                or_(
                    FriendshipModel.user_id == user_id,
                    FriendshipModel.friend_id == user_id,
                )
            )
            .scalar()
            or 0
        )

    def exists(self, user_id: int, other_id: int) -> bool:
        query = self.session.query(FriendshipModel.id).filter(_pair_filter(user_id, other_id))
        return self.session.query(query.exists()).scalar()

    def create(self, *, user_id: int, friend_id: int) -> Friendship:
        model = FriendshipModel(user_id=user_id, friend_id=friend_id)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete_pair(self, user_id: int, other_id: int) -> int:
        deleted = (
            self.session.query(FriendshipModel)
            .filter(_pair_filter(user_id, other_id))
            .delete(synchronize_session="fetch")
        )
        self.session.flush()
        return deleted

    @staticmethod
    def _to_entity(model: FriendshipModel) -> Friendship:
        return Friendship(
            id=model.id,
            user_id=model.user_id,
            friend_id=model.friend_id,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["FriendshipRepository"]
