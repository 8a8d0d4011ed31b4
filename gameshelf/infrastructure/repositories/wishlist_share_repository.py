"""Persistence helpers for wishlist share tokens."""

from __future__ import annotations

from sqlalchemy.orm import Session

from gameshelf.domain.entities import WishlistShare
from gameshelf.infrastructure.models import WishlistShareModel
from gameshelf.utils import ensure_app_timezone


class WishlistShareRepository:
    """Provide lookups and lifecycle updates for share tokens."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_active_by_token(self, token: str) -> WishlistShare | None:
        model = (
            self.session.query(WishlistShareModel)
            .filter(WishlistShareModel.token == token)
            .filter(WishlistShareModel.is_active.is_(True))
            .first()
        )
        return self._to_entity(model) if model else None

    def get_active_for_user(self, user_id: int) -> WishlistShare | None:
        model = (
            self.session.query(WishlistShareModel)
            .filter(WishlistShareModel.user_id == user_id)
            .filter(WishlistShareModel.is_active.is_(True))
            .first()
        )
        return self._to_entity(model) if model else None

    def latest_for_user(self, user_id: int) -> WishlistShare | None:
        model = (
            self.session.query(WishlistShareModel)
            .filter(WishlistShareModel.user_id == user_id)
            .order_by(
                WishlistShareModel.created_at.desc(), WishlistShareModel.id.desc()
            )
            .first()
        )
        return self._to_entity(model) if model else None

    def deactivate_all(self, user_id: int) -> int:
        updated = (
            self.session.query(WishlistShareModel)
            .filter(WishlistShareModel.user_id == user_id)
            .filter(WishlistShareModel.is_active.is_(True))
            .update({WishlistShareModel.is_active: False}, synchronize_session="fetch")
        )
        self.session.flush()
        return updated

    def create(self, share: WishlistShare) -> WishlistShare:
        model = WishlistShareModel(
            user_id=share.user_id,
            token=share.token,
            is_active=share.is_active,
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def set_active(self, share_id: int, is_active: bool) -> WishlistShare:
        model = self.session.get(WishlistShareModel, share_id)
        if model is None:
            msg = f"Share token with id {share_id} not found"
            raise ValueError(msg)
        model.is_active = is_active
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: WishlistShareModel) -> WishlistShare:
        return WishlistShare(
            id=model.id,
            user_id=model.user_id,
            token=model.token,
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["WishlistShareRepository"]
