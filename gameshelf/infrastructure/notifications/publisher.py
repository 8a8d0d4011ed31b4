"""Utility helpers to push notification events to websocket subscribers.

Two events are emitted: ``notification.created`` carries the serialized
notification, ``notifications.changed`` only tells subscribers that their
cached list is stale.
"""

from __future__ import annotations

import asyncio
from typing import Any

from anyio import from_thread

from gameshelf.domain.entities import Notification
from gameshelf.utils import isoformat_or_none

from .manager import NotificationConnectionManager, notification_manager

EVENT_NOTIFICATION_CREATED = "notification.created"
EVENT_NOTIFICATIONS_CHANGED = "notifications.changed"


class NotificationPublisher:
    """Serialize notification events and schedule their delivery."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager

    def dispatch_created(self, notification: Notification) -> None:
        """Schedule ``notification`` to be delivered to its recipient."""

        message = {
            "type": EVENT_NOTIFICATION_CREATED,
            "data": self._serialize(notification),
        }
        self._schedule_send(notification.user_id, message)

    def dispatch_changed(self, user_id: int, *, notification_id: int | None = None) -> None:
        """Tell the subscribers of ``user_id`` to refresh their notification list."""

        message = {
            "type": EVENT_NOTIFICATIONS_CHANGED,
            "data": {"notificationId": notification_id},
        }
        self._schedule_send(user_id, message)

    def _schedule_send(self, user_id: int, message: dict[str, Any]) -> None:
        if not user_id or not self._manager.has_connections(user_id):
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Sync route handlers run in a worker thread owned by the event loop.
            from_thread.run(self._manager.send_to_user, user_id, message)
        else:
            loop.create_task(self._manager.send_to_user(user_id, message))

    @staticmethod
    def _serialize(notification: Notification) -> dict[str, Any]:
        return {
            "id": notification.id,
            "type": notification.type,
            "referenceId": notification.reference_id,
            "isRead": notification.is_read,
            "createdAt": isoformat_or_none(notification.created_at),
        }


notification_publisher = NotificationPublisher(notification_manager)


def dispatch_notification_created(notification: Notification) -> None:
    """Public helper that delegates to the shared publisher instance."""

    notification_publisher.dispatch_created(notification)


def dispatch_notifications_changed(
    user_id: int, *, notification_id: int | None = None
) -> None:
    notification_publisher.dispatch_changed(user_id, notification_id=notification_id)


__all__ = [
    "EVENT_NOTIFICATION_CREATED",
    "EVENT_NOTIFICATIONS_CHANGED",
    "NotificationPublisher",
    "notification_publisher",
    "dispatch_notification_created",
    "dispatch_notifications_changed",
]
