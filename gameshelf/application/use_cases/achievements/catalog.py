"""Default achievement catalogue."""

from gameshelf.domain.entities import (
    REQUIREMENT_FRIENDS_COUNT,
    REQUIREMENT_GAMES_COMPLETED,
    REQUIREMENT_GAMES_OWNED,
    REQUIREMENT_WISHLIST_SIZE,
    Achievement,
)


def _achievement(
    code: str,
    name: str,
    description: str,
    category: str,
    requirement_type: str,
    requirement_value: int,
    points: int,
) -> Achievement:
    return Achievement(
        id=None,
        code=code,
        name=name,
        description=description,
        category=category,
        requirement_type=requirement_type,
        requirement_value=requirement_value,
        points=points,
    )


DEFAULT_ACHIEVEMENTS: tuple[Achievement, ...] = (
    _achievement("collector_1", "First Cartridge", "Own your first game.", "collection", REQUIREMENT_GAMES_OWNED, 1, 10),
    _achievement("collector_10", "Shelf Starter", "Own 10 games.", "collection", REQUIREMENT_GAMES_OWNED, 10, 25),
    _achievement("collector_50", "Curator", "Own 50 games.", "collection", REQUIREMENT_GAMES_OWNED, 50, 50),
    _achievement("collector_100", "Archivist", "Own 100 games.", "collection", REQUIREMENT_GAMES_OWNED, 100, 100),
    _achievement("finisher_1", "Credits Rolled", "Complete a game.", "completion", REQUIREMENT_GAMES_COMPLETED, 1, 10),
    _achievement("finisher_10", "Marathoner", "Complete 10 games.", "completion", REQUIREMENT_GAMES_COMPLETED, 10, 40),
    _achievement("finisher_25", "Completionist", "Complete 25 games.", "completion", REQUIREMENT_GAMES_COMPLETED, 25, 75),
    _achievement("dreamer_1", "Window Shopper", "Add a game to your wishlist.", "wishlist", REQUIREMENT_WISHLIST_SIZE, 1, 5),
    _achievement("dreamer_10", "Big Dreams", "Keep 10 games on your wishlist.", "wishlist", REQUIREMENT_WISHLIST_SIZE, 10, 20),
    _achievement("social_1", "Player Two", "Add your first friend.", "social", REQUIREMENT_FRIENDS_COUNT, 1, 10),
    _achievement("social_5", "Party Up", "Have 5 friends.", "social", REQUIREMENT_FRIENDS_COUNT, 5, 30),
)
