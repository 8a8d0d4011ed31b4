"""Use case resolving an anonymous share token to its owner."""

from sqlalchemy.orm import Session

from gameshelf.domain.entities import WishlistShare
from gameshelf.domain.errors import InvalidShareToken
from gameshelf.infrastructure.repositories import WishlistShareRepository


def resolve_share_token(session: Session, token: str | None) -> WishlistShare:
    """Return the active share for ``token``.

    Unknown and inactive tokens raise the same :class:`InvalidShareToken` so
    callers cannot tell them apart.
    """

    token = (token or "").strip()
    if not token:
        raise InvalidShareToken()
    share = WishlistShareRepository(session).get_active_by_token(token)
    if share is None:
        raise InvalidShareToken()
    return share
