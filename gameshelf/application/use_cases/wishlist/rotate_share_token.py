"""Use case replacing the caller's share token with a fresh one."""

import logging

from sqlalchemy.orm import Session

from gameshelf.domain.entities import WishlistShare
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.repositories import WishlistShareRepository
from gameshelf.infrastructure.security import generate_share_token

logger = logging.getLogger(__name__)


def rotate_share_token(session: Session, *, user_id: int) -> WishlistShare:
    """Deactivate every active token of ``user_id`` and mint a new active one.

    Old tokens are kept, inactive, so previously shared links stop working.
    """

    repository = WishlistShareRepository(session)
    with atomic(session):
        deactivated = repository.deactivate_all(user_id)
        share = repository.create(
            WishlistShare(
                id=None,
                user_id=user_id,
                token=generate_share_token(),
                is_active=True,
            )
        )
    logger.info(
        "Rotated wishlist share for user %s (%s token(s) deactivated)", user_id, deactivated
    )
    return share
