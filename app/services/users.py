"""Credential store: persistent lookup and creation of user accounts."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateKeyError
from app.models import User

logger = logging.getLogger(__name__)


class UserStore:
    """Access to the users table through one SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_username(self, username: str) -> User | None:
        return self.session.query(User).filter(User.username == username).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.session.query(User).filter(User.id == user_id).first()

    def count(self) -> int:
        return self.session.query(func.count(User.id)).scalar() or 0

    def create(
        self,
        username: str,
        password_hash: str,
        name: str = "",
        role: str = "officer",
        department: str = "",
    ) -> User:
        """
        Insert and commit a new user. The unique index on username is the source of truth:
        raises DuplicateKeyError when it fires, after rolling the session back.
        """
        user = User(
            username=username,
            password_hash=password_hash,
            name=name,
            role=role,
            department=department,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("Rejected duplicate username %r", username)
            raise DuplicateKeyError("Username already exists") from e
        self.session.refresh(user)
        return user
