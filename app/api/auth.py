"""Login, registration, profile and logout routes, plus the bearer-token auth gate."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import ForbiddenError, NotFoundError, UnauthenticatedError
from app.core.security import TokenError, decode_access_token
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    TokenClaims,
    UserPublic,
    UserResponse,
)
from app.services.auth import authenticate, register_user
from app.services.users import UserStore

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_current_claims(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """
    Dependency: require a valid Bearer JWT.

    No bearer token -> 401. Token present but invalid or expired -> 403.
    Otherwise the decoded claims are stored on request.state.user and returned.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()
    try:
        claims = decode_access_token(credentials.credentials)
    except TokenError as e:
        raise ForbiddenError() from e
    request.state.user = claims
    return claims


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Create an account. 400 on missing fields, 409 if the username is taken."""
    register_user(db, body)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT and the user profile.
    Include the token in the Authorization header as: Bearer <token>
    """
    token, user = authenticate(db, body)
    return LoginResponse(token=token, user=UserPublic.model_validate(user))


@router.get("/user", response_model=UserResponse)
def read_current_user(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    user = UserStore(db).find_by_id(claims.id)
    if user is None:
        raise NotFoundError("User not found")
    return UserResponse(user=UserPublic.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
def logout(
    _claims: Annotated[TokenClaims, Depends(get_current_claims)],
) -> MessageResponse:
    """Acknowledge logout. Tokens are stateless; the client discards its copy."""
    return MessageResponse(message="Logged out successfully")
