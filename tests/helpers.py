"""Shared test fixtures: in-memory SQLite store, default accounts, sample damage reports, API client."""

import unittest
from datetime import datetime
from unittest.mock import patch

from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import DefaultAccount
from app.core.database import get_db
from app.main import app
from app.models import Base
from app.schemas.damages import Coordinates, DamageCreate
from app.services.seed import seed_default_users

DEFAULT_ACCOUNTS = [
    DefaultAccount(
        username="admin",
        password=SecretStr("government123"),
        name="Administrator",
        role="admin",
        department="System Administration",
    ),
    DefaultAccount(
        username="officer",
        password=SecretStr("officer456"),
        name="John Officer",
        role="officer",
        department="Public Services",
    ),
]


def make_session_factory() -> sessionmaker[Session]:
    """Fresh in-memory database with all tables; one shared connection across sessions."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def damage(
    damage_id: int,
    severity: str = "Medium",
    status: str = "Pending",
    **kwargs: object,
) -> DamageCreate:
    """Build a minimal DamageCreate for tests."""
    defaults = {
        "type": "Pothole",
        "location": "Main Street",
        "coords": Coordinates(lat=12.97, lng=77.59),
        "description": "Test damage report",
        "reported_date": datetime(2024, 5, 1, 10, 0, 0),
    }
    defaults.update(kwargs)
    return DamageCreate(id=damage_id, severity=severity, status=status, **defaults)


class ApiTestCase(unittest.TestCase):
    """Client against a freshly seeded in-memory store."""

    def setUp(self) -> None:
        patcher = patch("app.core.security.BCRYPT_ROUNDS", 4)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.session_factory = make_session_factory()

        def override_get_db():
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.addCleanup(app.dependency_overrides.clear)
        seed_default_users(self.session_factory, DEFAULT_ACCOUNTS)
        self.client = TestClient(app)

    def login(self, username: str = "admin", password: str = "government123") -> str:
        response = self.client.post("/api/login", json={"username": username, "password": password})
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["token"]

    def auth(self, token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
