"""Bootstrap seeding: make sure the configured default accounts exist."""

import logging
from collections.abc import Callable, Iterable

from sqlalchemy.orm import Session

from app.core.config import DefaultAccount
from app.core.errors import DuplicateKeyError
from app.core.security import hash_password
from app.services.users import UserStore

logger = logging.getLogger(__name__)


def seed_default_users(
    session_factory: Callable[[], Session],
    accounts: Iterable[DefaultAccount],
) -> tuple[int, int, int]:
    """
    Create each account whose username is absent; leave existing ones untouched.

    Returns (created, skipped, failed). Idempotent: a second run creates nothing and
    never hashes a password for an account that already exists. Each account gets its
    own session so one failure does not block the rest.
    """
    created = skipped = failed = 0
    for account in accounts:
        db = session_factory()
        try:
            store = UserStore(db)
            if store.find_by_username(account.username) is not None:
                skipped += 1
                continue
            store.create(
                username=account.username,
                password_hash=hash_password(account.password.get_secret_value()),
                name=account.name,
                role=account.role,
                department=account.department,
            )
            created += 1
            logger.info("Seeded default user %r (%s)", account.username, account.role)
        except DuplicateKeyError:
            # Another process created it between lookup and insert.
            skipped += 1
        except Exception:
            failed += 1
            logger.exception("Failed to seed default user %r", account.username)
        finally:
            db.close()

    if created or failed:
        logger.info(
            "Default user seeding: created=%s, skipped=%s, failed=%s",
            created,
            skipped,
            failed,
        )
    return (created, skipped, failed)
