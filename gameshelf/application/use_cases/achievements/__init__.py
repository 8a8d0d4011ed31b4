"""Use cases for achievements."""

from .catalog import DEFAULT_ACHIEVEMENTS
from .check_achievements import check_achievements, compute_progress
from .list_achievements import AchievementBoard, list_achievements
from .seed_achievements import seed_achievements

__all__ = [
    "DEFAULT_ACHIEVEMENTS",
    "AchievementBoard",
    "check_achievements",
    "compute_progress",
    "list_achievements",
    "seed_achievements",
]
