#!/usr/bin/env python3
"""Create the database schema and load the sample employees.

Run from the backend/ directory:

    python3 scripts/seed.py [--database-url URL] [--force] [--verbose]

Without ``--force`` nothing is inserted when the employees table already has
rows. With ``--force`` every sample whose email is still free is inserted.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from app.core.config import Settings  # noqa: E402
from app.core.database import Database  # noqa: E402
from app.services.seed import seed_sample_employees  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create the employee directory schema and insert sample employees",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy async URL (default: DATABASE_URL from settings)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Insert samples even if the employees table is not empty",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def seed(args: argparse.Namespace) -> int:
    settings = Settings()
    if args.database_url:
        settings.DATABASE_URL = args.database_url
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    db = Database()
    logger.info("Connecting to database...")
    await db.initialize(settings)
    try:
        async with db.session() as session:
            inserted = await seed_sample_employees(session, force=args.force)
    finally:
        await db.close()

    if inserted:
        logger.info("Inserted %d sample employees", inserted)
    else:
        logger.info("Nothing to insert")
    return inserted


def main() -> None:
    args = parse_args()
    asyncio.run(seed(args))


if __name__ == "__main__":
    main()
