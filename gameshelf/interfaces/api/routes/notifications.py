"""Endpoints and websocket handler for the notification inbox."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect
from sqlalchemy.orm import Session

from gameshelf.application.use_cases.notifications import (
    NotificationView,
    dismiss_notification,
    list_active_notifications,
    mark_notification_read,
    refuse_purchase,
    validate_purchase,
)
from gameshelf.domain.entities import User, UserGame
from gameshelf.infrastructure.database import SessionLocal, get_db
from gameshelf.infrastructure.notifications import notification_manager
from gameshelf.interfaces.api.dependencies import get_current_active_user, resolve_current_user
from gameshelf.interfaces.api.routes_helpers import raise_http_error
from gameshelf.interfaces.api.schemas import (
    NotificationAchievementRead,
    NotificationFriendRead,
    NotificationGameRead,
    NotificationListRead,
    NotificationRead,
    PurchaseDecisionRead,
    SuccessResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _view_to_schema(view: NotificationView) -> NotificationRead:
    notification = view.notification
    schema = NotificationRead(
        id=notification.id,
        type=notification.type,
        is_read=notification.is_read,
        created_at=notification.created_at,
        read_at=notification.read_at,
        user_game_id=notification.user_game_id,
        achievement_unlock_id=notification.achievement_unlock_id,
        friend_id=notification.friend_id,
    )
    if view.game is not None:
        schema.game = NotificationGameRead(
            id=view.game.id, title=view.game.title, cover_url=view.game.cover_url
        )
    if view.unlock is not None and view.unlock.achievement is not None:
        achievement = view.unlock.achievement
        schema.achievement = NotificationAchievementRead(
            id=achievement.id,
            name=achievement.name,
            description=achievement.description,
            icon_url=achievement.icon_url,
            points=achievement.points,
        )
        schema.unlocked_at = view.unlock.unlocked_at
    if view.friend is not None:
        schema.friend = NotificationFriendRead(
            id=view.friend.id,
            username=view.friend.username,
            full_name=view.friend.full_name,
            avatar_url=view.friend.avatar_url,
        )
    return schema


def _decision_to_schema(item: UserGame) -> PurchaseDecisionRead:
    return PurchaseDecisionRead(item_id=item.id, status=item.status, buy=bool(item.buy))


@router.get("", response_model=NotificationListRead)
def list_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the live notifications of the caller, newest first."""

    feed = list_active_notifications(db, user_id=current_user.id)
    return NotificationListRead(
        notifications=[_view_to_schema(view) for view in feed.notifications],
        count=feed.count,
        wishlist_count=feed.wishlist_count,
        achievement_count=feed.achievement_count,
        friend_count=feed.friend_count,
    )


@router.patch("/{notification_id}/validate", response_model=PurchaseDecisionRead)
def validate_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Accept the gift: the game moves from the wishlist to the collection."""

    try:
        item = validate_purchase(db, notification_id=notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return _decision_to_schema(item)


@router.patch("/{notification_id}/refuse", response_model=PurchaseDecisionRead)
def refuse_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Decline the gift: the game stays in the wishlist."""

    try:
        item = refuse_purchase(db, notification_id=notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return _decision_to_schema(item)


@router.patch("/{notification_id}/dismiss", response_model=SuccessResponse)
def dismiss(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        dismiss_notification(db, notification_id=notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return SuccessResponse()


@router.patch("/{notification_id}/read", response_model=SuccessResponse)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        mark_notification_read(db, notification_id=notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return SuccessResponse()


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Stream notification events to the user identified by the ``token`` query param."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=1008)
        return

    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
        if not user.is_active:
            await websocket.close(code=1008)
            return
    except HTTPException:
        await websocket.close(code=1008)
        return
    finally:
        session.close()

    await notification_manager.connect(user.id, websocket)
    try:
        while True:
            message = await websocket.receive_json()
            if isinstance(message, dict) and message.get("type") == "ping":
                await websocket.send_json({"type": "pong"})
    except WebSocketDisconnect:
        logger.debug("Notification websocket closed for user %s", user.id)
    finally:
        notification_manager.disconnect(user.id, websocket)
