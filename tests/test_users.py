"""Tests for the credential store and the login/registration flows."""

import unittest
from unittest.mock import MagicMock, patch

from sqlalchemy.exc import IntegrityError

from app.core.errors import BadRequestError, DuplicateKeyError, InvalidCredentialsError
from app.schemas.auth import LoginRequest, RegisterRequest
from app.services.auth import authenticate, register_user
from app.services.users import UserStore
from tests.helpers import make_session_factory


class TestUserStore(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()
        self.addCleanup(self.db.close)
        self.store = UserStore(self.db)

    def test_create_and_find(self) -> None:
        user = self.store.create("alice", "hash", name="Alice", role="officer", department="Roads")
        self.assertIsNotNone(user.id)
        self.assertEqual(self.store.find_by_username("alice").id, user.id)
        self.assertEqual(self.store.find_by_id(user.id).username, "alice")
        self.assertEqual(self.store.count(), 1)

    def test_find_missing_returns_none(self) -> None:
        self.assertIsNone(self.store.find_by_username("nobody"))
        self.assertIsNone(self.store.find_by_id(42))

    def test_duplicate_username_raises_and_store_stays_usable(self) -> None:
        self.store.create("alice", "hash")
        with self.assertRaises(DuplicateKeyError):
            self.store.create("alice", "other-hash")
        self.assertEqual(self.store.count(), 1)
        self.assertEqual(self.store.find_by_username("alice").password_hash, "hash")

    def test_integrity_error_rolls_back(self) -> None:
        session = MagicMock()
        session.commit.side_effect = IntegrityError("INSERT", {}, Exception("unique"))
        with self.assertRaises(DuplicateKeyError):
            UserStore(session).create("alice", "hash")
        session.rollback.assert_called_once()


class TestAuthenticate(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch("app.core.security.BCRYPT_ROUNDS", 4)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.db = make_session_factory()()
        self.addCleanup(self.db.close)
        register_user(
            self.db,
            RegisterRequest(
                username="officer",
                password="officer456",
                name="John Officer",
                role="officer",
                department="Public Services",
            ),
        )

    def test_valid_credentials_return_token_and_user(self) -> None:
        token, user = authenticate(self.db, LoginRequest(username="officer", password="officer456"))
        self.assertEqual(user.username, "officer")
        self.assertEqual(len(token.split(".")), 3)

    def test_missing_fields(self) -> None:
        with self.assertRaises(BadRequestError):
            authenticate(self.db, LoginRequest(username="officer"))
        with self.assertRaises(BadRequestError):
            authenticate(self.db, LoginRequest(password="officer456"))

    def test_same_error_for_unknown_user_and_wrong_password(self) -> None:
        with self.assertRaises(InvalidCredentialsError) as unknown:
            authenticate(self.db, LoginRequest(username="ghost", password="officer456"))
        with self.assertRaises(InvalidCredentialsError) as wrong:
            authenticate(self.db, LoginRequest(username="officer", password="officer457"))
        self.assertEqual(unknown.exception.message, wrong.exception.message)
        self.assertEqual(unknown.exception.status_code, 401)


class TestRegisterUser(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch("app.core.security.BCRYPT_ROUNDS", 4)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.db = make_session_factory()()
        self.addCleanup(self.db.close)

    def test_password_is_hashed(self) -> None:
        user = register_user(
            self.db,
            RegisterRequest(
                username="  bob  ", password="long-enough", name="Bob", role="officer", department="Roads"
            ),
        )
        self.assertEqual(user.username, "bob")
        self.assertNotEqual(user.password_hash, "long-enough")

    def test_lists_missing_fields(self) -> None:
        with self.assertRaises(BadRequestError) as ctx:
            register_user(self.db, RegisterRequest(username="bob", password="long-enough"))
        self.assertIn("name", ctx.exception.message)
        self.assertIn("role", ctx.exception.message)
        self.assertIn("department", ctx.exception.message)

    def test_long_password_rejected(self) -> None:
        with self.assertRaises(BadRequestError):
            register_user(
                self.db,
                RegisterRequest(username="bob", password="x" * 129, name="B", role="r", department="d"),
            )


if __name__ == "__main__":
    unittest.main()
