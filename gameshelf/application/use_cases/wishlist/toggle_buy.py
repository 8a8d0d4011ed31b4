"""Use case recording or withdrawing the intent to buy a wishlist item."""

import logging

from sqlalchemy.orm import Session

from gameshelf.domain.entities import NOTIFICATION_TYPE_WISHLIST, UserGame
from gameshelf.domain.errors import InvalidState, NotFound, Unauthorized
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.notifications import (
    dispatch_notification_created,
    dispatch_notifications_changed,
)
from gameshelf.infrastructure.repositories import (
    NotificationRepository,
    UserGameRepository,
)

from .resolve_share_token import resolve_share_token

logger = logging.getLogger(__name__)


def toggle_buy(
    session: Session,
    *,
    item_id: int,
    buy: bool,
    token: str | None = None,
    user_id: int | None = None,
) -> UserGame:
    """Set ``buy`` on a wishlist item reached through a share token or by its owner.

    With ``buy`` true the owner ends up with exactly one live purchase
    notification for the item; with ``buy`` false every live one is
    dismissed. The flag and the notification change in one transaction.
    """

    if token is not None:
        owner_id = resolve_share_token(session, token).user_id
    elif user_id is not None:
        owner_id = user_id
    else:
        raise Unauthorized()

    repository = UserGameRepository(session)
    item = repository.get_for_owner(item_id, user_id=owner_id)
    if item is None:
        raise NotFound("Wishlist item not found")
    if not item.is_wishlist:
        raise InvalidState("This game is no longer in the wishlist")

    notification_repository = NotificationRepository(session)
    created_notification = None
    dismissed: list[int] = []

    with atomic(session):
        if not repository.set_buy(item_id, buy, user_id=owner_id):
            raise InvalidState("This game is no longer in the wishlist")
        if buy:
            notification, created = notification_repository.create_if_absent(
                user_id=owner_id,
                notification_type=NOTIFICATION_TYPE_WISHLIST,
                reference_id=item_id,
            )
            if created:
                created_notification = notification
        else:
            dismissed = notification_repository.dismiss_live_for_reference(
                NOTIFICATION_TYPE_WISHLIST, item_id, user_id=owner_id
            )

    logger.info(
        "Wishlist item %s of user %s marked buy=%s via %s",
        item_id,
        owner_id,
        buy,
        "share link" if token is not None else "owner session",
    )

    if created_notification is not None:
        dispatch_notification_created(created_notification)
    elif dismissed:
        dispatch_notifications_changed(owner_id)

    updated = repository.get(item_id)
    if updated is None:
        raise NotFound("Wishlist item not found")
    return updated
