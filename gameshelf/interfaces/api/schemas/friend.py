"""Friendship schemas."""

from pydantic import Field

from .base import CamelModel


class FriendRead(CamelModel):
    id: int
    username: str
    full_name: str | None = None
    avatar_url: str | None = None
    friend_code: str


class FriendListRead(CamelModel):
    friends: list[FriendRead]
    count: int


class AddFriendByCodeRequest(CamelModel):
    code: str = Field(..., min_length=1, max_length=32)


class RemoveFriendRequest(CamelModel):
    friend_id: int = Field(..., ge=1)


class AddFriendRead(CamelModel):
    success: bool = True
    friend: FriendRead
