"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    username: str
    full_name: str | None
    email: str
    password: str
    avatar_url: str | None
    friend_code: str
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None
    # Public profiles expose their collection to other collectors.
    is_public: bool = False
