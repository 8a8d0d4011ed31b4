"""Use cases for browsing the public profiles of other collectors."""

from .get_public_collection import PublicCollection, get_public_collection
from .search_profiles import MAX_RESULTS, search_profiles

__all__ = [
    "MAX_RESULTS",
    "PublicCollection",
    "get_public_collection",
    "search_profiles",
]
