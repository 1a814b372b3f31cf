"""
CLI entrypoint for the bootstrap seeder. Creates the DEFAULT_USERS accounts that do
not exist yet; existing accounts are left untouched.

  python -m app.seed
"""

import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.services.seed import seed_default_users

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Run the seeder once; exit 1 if any account failed."""
    settings = get_settings()
    if not settings.DEFAULT_USERS:
        logger.warning("DEFAULT_USERS is empty; nothing to seed.")
        return 0
    created, skipped, failed = seed_default_users(SessionLocal, settings.DEFAULT_USERS)
    logger.info("Seeding completed: created=%s skipped=%s failed=%s", created, skipped, failed)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
