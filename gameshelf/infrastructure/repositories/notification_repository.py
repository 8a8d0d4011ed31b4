"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from gameshelf.domain.entities import (
    NOTIFICATION_TYPE_ACHIEVEMENT,
    NOTIFICATION_TYPE_FRIEND,
    NOTIFICATION_TYPE_WISHLIST,
    Notification,
)
from gameshelf.infrastructure.database import insert_ignoring_conflicts
from gameshelf.infrastructure.models import NotificationModel
from gameshelf.utils import ensure_app_timezone, now_in_app_timezone

_REFERENCE_COLUMNS = {
    NOTIFICATION_TYPE_WISHLIST: NotificationModel.user_game_id,
    NOTIFICATION_TYPE_ACHIEVEMENT: NotificationModel.achievement_unlock_id,
    NOTIFICATION_TYPE_FRIEND: NotificationModel.friend_id,
}


class NotificationRepository:
    """Provide persistence operations for :class:`Notification` objects.

    Live notifications are unique per recipient and referenced entity; the
    partial unique indexes on the table enforce it and :meth:`create_if_absent`
    relies on them instead of checking first.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_for_user(self, notification_id: int, *, user_id: int) -> Notification | None:
        model = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .filter(NotificationModel.user_id == user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def list_live_for_user(self, user_id: int) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_dismissed.is_(False))
            .order_by(
                NotificationModel.created_at.desc(), NotificationModel.id.desc()
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def get_live(
        self, *, user_id: int, notification_type: str, reference_id: int
    ) -> Notification | None:
        column = _REFERENCE_COLUMNS[notification_type]
        model = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.type == notification_type)
            .filter(column == reference_id)
            .filter(NotificationModel.is_dismissed.is_(False))
            .first()
        )
        return self._to_entity(model) if model else None

    def create_if_absent(
        self, *, user_id: int, notification_type: str, reference_id: int
    ) -> tuple[Notification, bool]:
        """Return the live notification for the reference, inserting it if needed.

        The boolean is ``True`` when this call created the row.
        """

        if notification_type not in _REFERENCE_COLUMNS:
            msg = f"Unsupported notification type '{notification_type}'"
            raise ValueError(msg)

        values = {
            "user_id": user_id,
            "type": notification_type,
            _REFERENCE_COLUMNS[notification_type].key: reference_id,
            "is_read": False,
            "is_dismissed": False,
            "created_at": now_in_app_timezone(),
        }

        created = insert_ignoring_conflicts(self.session, NotificationModel, values)

        notification = self.get_live(
            user_id=user_id,
            notification_type=notification_type,
            reference_id=reference_id,
        )
        if notification is None:
            msg = "Live notification disappeared while it was being created"
            raise RuntimeError(msg)
        return notification, created

    def dismiss(self, notification_id: int, *, user_id: int) -> bool:
        """Dismiss a live notification; return ``False`` if it was already dismissed."""

        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
                NotificationModel.is_dismissed.is_(False),
            )
            .update(
                {
                    NotificationModel.is_dismissed: True,
                    NotificationModel.dismissed_at: now_in_app_timezone(),
                },
                synchronize_session="fetch",
            )
        )
        return updated == 1

    def dismiss_many(self, notification_ids: Iterable[int], *, user_id: int) -> int:
        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return 0
        return (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.user_id == user_id,
                NotificationModel.is_dismissed.is_(False),
            )
            .update(
                {
                    NotificationModel.is_dismissed: True,
                    NotificationModel.dismissed_at: now_in_app_timezone(),
                },
                synchronize_session="fetch",
            )
        )

    def dismiss_live_for_reference(
        self, notification_type: str, reference_id: int, *, user_id: int
    ) -> list[int]:
        """Dismiss the live notifications of ``user_id`` pointing at ``reference_id``.

        Returns the identifiers that were dismissed.
        """

        ids = [
            notification_id
            for (notification_id,) in self.session.query(NotificationModel.id)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.type == notification_type,
                _REFERENCE_COLUMNS[notification_type] == reference_id,
                NotificationModel.is_dismissed.is_(False),
            )
            .all()
        ]
        self.dismiss_many(ids, user_id=user_id)
        return ids

    def mark_as_read(self, notification_id: int, *, user_id: int) -> bool:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
                NotificationModel.is_dismissed.is_(False),
                NotificationModel.is_read.is_(False),
            )
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.read_at: now_in_app_timezone(),
                },
                synchronize_session="fetch",
            )
        )
        return updated == 1

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            user_game_id=model.user_game_id,
            achievement_unlock_id=model.achievement_unlock_id,
            friend_id=model.friend_id,
            is_read=bool(model.is_read),
            is_dismissed=bool(model.is_dismissed),
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
            dismissed_at=ensure_app_timezone(model.dismissed_at),
        )


__all__ = ["NotificationRepository"]
