"""Use cases for friendships."""

from .add_friend_by_code import add_friend_by_code
from .list_friends import list_friends
from .remove_friend import remove_friend

__all__ = ["add_friend_by_code", "list_friends", "remove_friend"]
