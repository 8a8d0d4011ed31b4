"""Utility script to load the default achievement catalogue into the database."""

from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from gameshelf.application.use_cases.achievements import seed_achievements
from gameshelf.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Insert the default GameShelf achievements that are missing.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Muestra información de progreso durante la carga.",
    )
    return parser.parse_args()


def main() -> None:
    """Create the tables if needed and seed the catalogue."""

    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    initialize_database()

    session = SessionLocal()
    try:
        created = seed_achievements(session)
    except ValueError as exc:
        raise SystemExit(f"Invalid achievement definition: {exc}") from exc
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not store the achievements: {exc}") from exc
    finally:
        session.close()

    print(f"{created} achievement(s) added.")


if __name__ == "__main__":
    main()
