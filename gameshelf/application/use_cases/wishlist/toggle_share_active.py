"""Use case enabling or disabling the caller's share link."""

from sqlalchemy.orm import Session

from gameshelf.domain.entities import WishlistShare
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.repositories import WishlistShareRepository
from gameshelf.infrastructure.security import generate_share_token


def toggle_share_active(
    session: Session, *, user_id: int, is_active: bool
) -> WishlistShare | None:
    """Flip the active flag of the most recent token without changing its value.

    Activating when the user never shared their wishlist mints a token.
    Deactivating in that case is a no-op and returns ``None``.
    """

    repository = WishlistShareRepository(session)
    latest = repository.latest_for_user(user_id)

    with atomic(session):
        if latest is None:
            if not is_active:
                return None
            return repository.create(
                WishlistShare(
                    id=None,
                    user_id=user_id,
                    token=generate_share_token(),
                    is_active=True,
                )
            )

        repository.deactivate_all(user_id)
        share = repository.set_active(latest.id, is_active)
    return share
