"""Login and registration flows composed from the credential store, hashing and tokens."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import BadRequestError, InvalidCredentialsError
from app.core.security import (
    PASSWORD_MAX_BYTES,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    create_access_token,
    hash_password,
    verify_password,
)
from app.models import User
from app.schemas.auth import LoginRequest, RegisterRequest
from app.services.users import UserStore

logger = logging.getLogger(__name__)

REGISTER_FIELDS = ("username", "password", "name", "role", "department")


def authenticate(db: Session, body: LoginRequest) -> tuple[str, User]:
    """
    Verify credentials and issue a token. Returns (token, user).

    Unknown username and wrong password raise the same InvalidCredentialsError.
    """
    username = (body.username or "").strip()
    if not username or not body.password:
        raise BadRequestError("Username and password are required")

    user = UserStore(db).find_by_username(username)
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("Failed login for username %r", username)
        raise InvalidCredentialsError()

    token = create_access_token(user.id, user.username, user.role)
    return token, user


def register_user(db: Session, body: RegisterRequest) -> User:
    """Validate and create a new account. DuplicateKeyError propagates from the store."""
    missing = [f for f in REGISTER_FIELDS if not (getattr(body, f) or "").strip()]
    if missing:
        raise BadRequestError(f"Missing required fields: {', '.join(missing)}")

    username = body.username.strip()
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        raise BadRequestError("Invalid username length.")
    if not (PASSWORD_MIN_LEN <= len(body.password) <= PASSWORD_MAX_LEN):
        raise BadRequestError(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters."
        )
    if len(body.password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise BadRequestError(
            f"Password must be at most {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded."
        )

    user = UserStore(db).create(
        username=username,
        password_hash=hash_password(body.password),
        name=body.name.strip(),
        role=body.role.strip(),
        department=body.department.strip(),
    )
    logger.info("Registered user %r with role %r", user.username, user.role)
    return user
