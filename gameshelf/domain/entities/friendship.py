"""Domain entity representing a friendship between two users."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Friendship:
    """Link created by ``user_id`` towards ``friend_id``; it counts both ways."""

    id: int | None
    user_id: int
    friend_id: int
    created_at: datetime | None = None

    def other(self, user_id: int) -> int:
        """Return the identifier of the member that is not ``user_id``."""

        return self.friend_id if self.user_id == user_id else self.user_id
