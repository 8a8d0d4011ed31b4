"""Use case returning the caller's share link as it currently stands."""

import logging

from sqlalchemy.orm import Session

from gameshelf.domain.entities import WishlistShare
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.repositories import WishlistShareRepository
from gameshelf.infrastructure.security import generate_share_token

logger = logging.getLogger(__name__)


def get_or_create_share(session: Session, *, user_id: int) -> WishlistShare:
    """Return the most recent share of ``user_id``, active or not.

    Only a user who never shared their wishlist gets a freshly minted,
    active token. A disabled link is returned disabled so reading it never
    re-enables sharing or replaces the URL.
    """

    repository = WishlistShareRepository(session)
    share = repository.get_active_for_user(user_id) or repository.latest_for_user(user_id)
    if share is not None:
        return share

    with atomic(session):
        share = repository.create(
            WishlistShare(
                id=None,
                user_id=user_id,
                token=generate_share_token(),
                is_active=True,
            )
        )
    logger.info("Created wishlist share %s for user %s", share.id, user_id)
    return share
