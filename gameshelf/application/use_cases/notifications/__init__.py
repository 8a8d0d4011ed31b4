"""Use cases for the notification inbox and purchase decisions."""

from .dismiss_notification import dismiss_notification
from .list_active_notifications import (
    NotificationFeed,
    NotificationView,
    list_active_notifications,
)
from .mark_notification_read import mark_notification_read
from .refuse_purchase import refuse_purchase
from .validate_purchase import validate_purchase

__all__ = [
    "NotificationFeed",
    "NotificationView",
    "dismiss_notification",
    "list_active_notifications",
    "mark_notification_read",
    "refuse_purchase",
    "validate_purchase",
]
