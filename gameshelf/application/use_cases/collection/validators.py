"""Validation helpers shared by the collection use cases."""

from gameshelf.domain.entities import GAME_STATUSES
from gameshelf.domain.errors import InvalidInput

MIN_RATING = 0
MAX_RATING = 10


def ensure_valid_status(status: str) -> str:
    normalized = status.strip().upper()
    if normalized not in GAME_STATUSES:
        allowed = ", ".join(GAME_STATUSES)
        raise InvalidInput(f"Unknown status '{status}'. Allowed values: {allowed}")
    return normalized


def ensure_valid_rating(rating: int | None) -> int | None:
    if rating is not None and not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidInput(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    return rating
