"""Use case inserting the default achievement catalogue."""

from collections.abc import Iterable
import logging

from sqlalchemy.orm import Session

from gameshelf.domain.entities import REQUIREMENT_TYPES, Achievement
from gameshelf.domain.errors import InvalidInput
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.repositories import AchievementRepository

from .catalog import DEFAULT_ACHIEVEMENTS

logger = logging.getLogger(__name__)


def seed_achievements(
    session: Session, achievements: Iterable[Achievement] = DEFAULT_ACHIEVEMENTS
) -> int:
    """Insert the achievements whose code is not stored yet; return how many."""

    repository = AchievementRepository(session)
    created = 0
    with atomic(session):
        for achievement in achievements:
            if achievement.requirement_type not in REQUIREMENT_TYPES:
                raise InvalidInput(
                    f"Unknown requirement type '{achievement.requirement_type}'"
                )
            if repository.get_by_code(achievement.code) is not None:
                continue
            repository.create(achievement)
            created += 1

    logger.info("Seeded %s achievement(s)", created)
    return created
