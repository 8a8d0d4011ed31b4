"""Realtime notification helpers for the infrastructure layer."""

from .manager import NotificationConnectionManager, notification_manager
from .publisher import (
    EVENT_NOTIFICATION_CREATED,
    EVENT_NOTIFICATIONS_CHANGED,
    NotificationPublisher,
    dispatch_notification_created,
    dispatch_notifications_changed,
    notification_publisher,
)

__all__ = [
    "EVENT_NOTIFICATION_CREATED",
    "EVENT_NOTIFICATIONS_CHANGED",
    "NotificationConnectionManager",
    "notification_manager",
    "NotificationPublisher",
    "notification_publisher",
    "dispatch_notification_created",
    "dispatch_notifications_changed",
]
