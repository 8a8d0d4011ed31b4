"""Utility helpers shared by the persistence and delivery layers."""

from .datetime import (
    ensure_app_timezone,
    get_app_timezone,
    isoformat_or_none,
    now_in_app_timezone,
)

__all__ = [
    "ensure_app_timezone",
    "get_app_timezone",
    "isoformat_or_none",
    "now_in_app_timezone",
]
