"""Tests for app.services.seed: idempotent default-account bootstrap."""

import unittest
from unittest.mock import MagicMock, patch

from pydantic import SecretStr

from app.core import security
from app.core.config import DefaultAccount
from app.core.security import verify_password
from app.models import User
from app.services.seed import seed_default_users
from tests.helpers import DEFAULT_ACCOUNTS, make_session_factory


class TestSeedDefaultUsers(unittest.TestCase):
    """Seeding against a real (in-memory) store."""

    def setUp(self) -> None:
        patcher = patch("app.core.security.BCRYPT_ROUNDS", 4)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.session_factory = make_session_factory()

    def _users(self) -> list[User]:
        db = self.session_factory()
        try:
            return db.query(User).order_by(User.username).all()
        finally:
            db.close()

    def test_creates_missing_accounts_with_hashed_passwords(self) -> None:
        created, skipped, failed = seed_default_users(self.session_factory, DEFAULT_ACCOUNTS)
        self.assertEqual((created, skipped, failed), (2, 0, 0))
        users = {u.username: u for u in self._users()}
        self.assertEqual(set(users), {"admin", "officer"})
        self.assertEqual(users["admin"].role, "admin")
        self.assertEqual(users["officer"].department, "Public Services")
        self.assertNotEqual(users["admin"].password_hash, "government123")
        self.assertTrue(verify_password("government123", users["admin"].password_hash))

    def test_second_run_creates_nothing_and_keeps_hashes(self) -> None:
        seed_default_users(self.session_factory, DEFAULT_ACCOUNTS)
        hashes_before = {u.username: u.password_hash for u in self._users()}

        with patch("app.services.seed.hash_password") as mock_hash:
            created, skipped, failed = seed_default_users(self.session_factory, DEFAULT_ACCOUNTS)
            mock_hash.assert_not_called()

        self.assertEqual((created, skipped, failed), (0, 2, 0))
        users = self._users()
        self.assertEqual(len(users), 2)
        self.assertEqual({u.username: u.password_hash for u in users}, hashes_before)

    def test_existing_account_is_not_mutated(self) -> None:
        db = self.session_factory()
        try:
            db.add(User(username="admin", password_hash="existing", name="Kept", role="admin", department="X"))
            db.commit()
        finally:
            db.close()

        created, skipped, _ = seed_default_users(self.session_factory, DEFAULT_ACCOUNTS)

        self.assertEqual((created, skipped), (1, 1))
        admin = next(u for u in self._users() if u.username == "admin")
        self.assertEqual(admin.password_hash, "existing")
        self.assertEqual(admin.name, "Kept")

    def test_failure_on_one_account_does_not_block_others(self) -> None:
        accounts = [
            DefaultAccount(username="broken", password=SecretStr("irrelevant1")),
            *DEFAULT_ACCOUNTS,
        ]

        def flaky_hash(plain: str) -> str:
            if plain == "irrelevant1":
                raise RuntimeError("hashing backend unavailable")
            return security.hash_password(plain)

        with patch("app.services.seed.hash_password", side_effect=flaky_hash):
            with self.assertLogs("app.services.seed", level="ERROR"):
                created, skipped, failed = seed_default_users(self.session_factory, accounts)

        self.assertEqual((created, skipped, failed), (2, 0, 1))
        self.assertEqual({u.username for u in self._users()}, {"admin", "officer"})

    def test_empty_account_list_is_a_no_op(self) -> None:
        self.assertEqual(seed_default_users(self.session_factory, []), (0, 0, 0))


class TestSeedSessionHandling(unittest.TestCase):
    """Each account gets its own session, closed even when lookup fails."""

    def test_sessions_closed_after_store_error(self) -> None:
        sessions = [MagicMock(), MagicMock()]
        sessions[0].query.side_effect = RuntimeError("connection lost")
        sessions[1].query.return_value.filter.return_value.first.return_value = object()
        factory = MagicMock(side_effect=sessions)

        with self.assertLogs("app.services.seed", level="ERROR"):
            result = seed_default_users(factory, DEFAULT_ACCOUNTS)

        self.assertEqual(result, (0, 1, 1))
        self.assertEqual(factory.call_count, 2)
        for session in sessions:
            session.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
