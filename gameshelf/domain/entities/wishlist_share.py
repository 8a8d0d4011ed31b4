"""Domain entity representing a wishlist share token."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class WishlistShare:
    """Opaque token granting anonymous access to one user's wishlist."""

    id: int | None
    user_id: int
    token: str
    is_active: bool
    created_at: datetime | None = None
