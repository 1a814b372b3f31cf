"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Credentials for login. Presence is checked by the login flow (400 when missing)."""

    username: str | None = Field(default=None, description="Username")
    password: str | None = Field(default=None, description="Password")


class RegisterRequest(BaseModel):
    """New account details. All fields are required; the handler reports which are missing."""

    username: str | None = None
    password: str | None = None
    name: str | None = None
    role: str | None = None
    department: str | None = None


class UserPublic(BaseModel):
    """User as returned to clients (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str
    role: str
    department: str


class LoginResponse(BaseModel):
    message: str = "Login successful"
    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    user: UserPublic


class UserResponse(BaseModel):
    user: UserPublic


class MessageResponse(BaseModel):
    message: str


class TokenClaims(BaseModel):
    """Identity decoded from a verified access token; attached to the request by the auth gate."""

    id: int
    username: str
    role: str
    issued_at: datetime
    expires_at: datetime
