"""Use cases for the game catalogue."""

from .create_game import create_game
from .get_game import get_game
from .search_games import search_games

__all__ = ["create_game", "get_game", "search_games"]
