"""Use cases for collection and wishlist entries."""

from .add_to_collection import add_to_collection
from .list_collection import list_collection
from .remove_from_collection import remove_from_collection
from .update_collection_entry import update_collection_entry

__all__ = [
    "add_to_collection",
    "list_collection",
    "remove_from_collection",
    "update_collection_entry",
]
