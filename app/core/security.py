"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings
from app.schemas.auth import TokenClaims

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Min/max lengths for username and password validation on registration.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128
# bcrypt only reads the first 72 bytes; longer passwords are rejected at registration.
PASSWORD_MAX_BYTES = 72

REQUIRED_CLAIMS = ("sub", "username", "role", "iat", "exp")


class TokenError(Exception):
    """Base class for token verification failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TokenExpiredError(TokenError):
    """Token signature is valid but exp is in the past."""


class TokenInvalidError(TokenError):
    """Bad signature, malformed structure, or missing claims."""


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    if not isinstance(plain_password, str) or not plain_password:
        raise ValueError("password must be a non-empty string")
    # bcrypt has a 72-byte limit; truncate to avoid errors (registration rejects longer passwords).
    pw_bytes = plain_password.encode("utf-8")[:PASSWORD_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    if not isinstance(plain_password, str) or not isinstance(hashed, str):
        return False
    pw_bytes = plain_password.encode("utf-8")[:PASSWORD_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    username: str,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT with sub (user id), username, role, iat and exp."""
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_EXPIRE_MINUTES))
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "username": username,
        "role": role,
        "iat": now,
        "exp": expire,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> TokenClaims:
    """
    Verify signature and expiry and return the token's claims.
    Raises TokenExpiredError past exp, TokenInvalidError for anything else wrong.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": list(REQUIRED_CLAIMS)},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("Token has expired") from e
    except jwt.PyJWTError as e:
        raise TokenInvalidError(f"Invalid token: {e}") from e

    try:
        return TokenClaims(
            id=int(payload["sub"]),
            username=payload["username"],
            role=payload["role"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
        )
    except (TypeError, ValueError) as e:
        raise TokenInvalidError("Invalid token payload") from e
