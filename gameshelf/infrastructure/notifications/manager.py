"""Registry of the websockets subscribed to each user's notification feed."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class NotificationConnectionManager:
    """Track open notification websockets per user and fan messages out to them.

    A user may have several tabs or devices open; each gets every event. A
    socket that fails on send is dropped from the registry.
    """

    def __init__(self) -> None:
        self._subscribers: dict[int, list[WebSocket]] = {}

    async def connect(self, user_id: int, websocket: WebSocket) -> None:
        await websocket.accept()
        sockets = self._subscribers.setdefault(user_id, [])
        if websocket not in sockets:
            sockets.append(websocket)
        logger.debug("User %s has %s notification socket(s)", user_id, len(sockets))

    def disconnect(self, user_id: int, websocket: WebSocket) -> None:
        sockets = self._subscribers.get(user_id)
        if not sockets:
            return
        if websocket in sockets:
            sockets.remove(websocket)
        if not sockets:
            del self._subscribers[user_id]

    def has_connections(self, user_id: int) -> bool:
        return bool(self._subscribers.get(user_id))

    def subscribers(self, user_id: int) -> tuple[WebSocket, ...]:
        return tuple(self._subscribers.get(user_id, ()))

    async def send_to_user(self, user_id: int, message: dict[str, Any]) -> int:
        """Push ``message`` to every socket of ``user_id``; return how many received it."""

        delivered = 0
        for websocket in self.subscribers(user_id):
            try:
                await websocket.send_json(message)
            except Exception as exc:  # closed sockets raise on send
                logger.debug("Dropping notification socket of user %s: %s", user_id, exc)
                self.disconnect(user_id, websocket)
            else:
                delivered += 1
        return delivered


notification_manager = NotificationConnectionManager()


__all__ = ["NotificationConnectionManager", "notification_manager"]
